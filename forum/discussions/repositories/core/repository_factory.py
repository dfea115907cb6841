"""Repository Factory - DRY Implementation"""
from forum.discussions.repositories.question.question_repo import QuestionRepo
from forum.discussions.repositories.answer.answer_repo import AnswerRepo
from forum.discussions.repositories.like.like_repo import LikeRepo

class RepositoryFactory:
    """Centralized repository creation (DRY principle)"""

    _question_repo = None
    _answer_repo = None
    _like_repo = None

    @classmethod
    def get_question_repo(cls) -> QuestionRepo:
        """Get question repository instance with caching"""
        if cls._question_repo is None:
            cls._question_repo = QuestionRepo()
        return cls._question_repo

    @classmethod
    def get_answer_repo(cls) -> AnswerRepo:
        """Get answer repository instance with caching"""
        if cls._answer_repo is None:
            cls._answer_repo = AnswerRepo()
        return cls._answer_repo

    @classmethod
    def get_like_repo(cls) -> LikeRepo:
        """Get like repository instance with caching"""
        if cls._like_repo is None:
            cls._like_repo = LikeRepo()
        return cls._like_repo

    @classmethod
    def reset(cls):
        """Drop cached repositories so the next call binds to the current client"""
        cls._question_repo = None
        cls._answer_repo = None
        cls._like_repo = None
