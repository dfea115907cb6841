"""Question Service - Business Logic Layer"""
import logging
from typing import Dict, List, Optional

from forum.discussions.config.settings import TOP_DISCUSSIONS_LIMIT
from forum.discussions.repositories.core.repository_factory import RepositoryFactory
from forum.discussions.utils.security.security_utils import to_object_id
from forum.discussions.utils.validation.input_validator import InputValidator

logger = logging.getLogger(__name__)

class QuestionService:
    def __init__(self):
        self.repo_factory = RepositoryFactory()

    def get_questions(self, user_id: str) -> List[Dict]:
        """All questions, newest first, with creator and the user's like"""
        question_repo = self.repo_factory.get_question_repo()
        questions = question_repo.get_questions_with_creator()
        return self.repo_factory.get_like_repo().attach_like_status(
            questions, to_object_id(user_id), "question"
        )

    def get_top_discussions(self) -> List[Dict]:
        """Questions with the fewest answers first, with creator"""
        return self.repo_factory.get_question_repo().get_top_discussions(TOP_DISCUSSIONS_LIMIT)

    def get_question_by_id(self, question_id: str, user_id: str) -> Optional[Dict]:
        """One question with creator and like status, or None"""
        question = self.repo_factory.get_question_repo().get_question_with_creator(to_object_id(question_id))
        if question is None:
            return None
        self.repo_factory.get_like_repo().attach_like_status([question], to_object_id(user_id), "question")
        return question

    def create_question(self, user_id: str, data: Dict) -> Dict:
        fields = InputValidator.require_text_fields(data, "title", "body")
        question = self.repo_factory.get_question_repo().insert_question(
            fields["title"], fields["body"], to_object_id(user_id)
        )
        logger.info(f"Question {question['_id']} created by {user_id}")
        return question
