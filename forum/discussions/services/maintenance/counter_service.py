"""Counter Maintenance Service - repairs denormalized counters"""
import logging
from typing import Dict, List

from forum.discussions.repositories.core.repository_factory import RepositoryFactory

logger = logging.getLogger(__name__)

class CounterService:
    """Rebuilds computed.answers / computed.likes from the answers and likes collections.

    The counters are maintained incrementally and can drift after a
    partial failure; this is the way back to the true counts.
    """

    def __init__(self):
        self.repo_factory = RepositoryFactory()

    def recompute_counters(self) -> Dict[str, List[str]]:
        question_repo = self.repo_factory.get_question_repo()
        answer_repo = self.repo_factory.get_answer_repo()
        like_repo = self.repo_factory.get_like_repo()

        answer_counts = answer_repo.count_by_question()
        question_likes = like_repo.count_by_target("question")
        answer_likes = like_repo.count_by_target("answer")

        fixed_questions = []
        for question in question_repo.iter_counters():
            computed = question.get("computed") or {}
            answers = answer_counts.get(question["_id"], 0)
            likes = question_likes.get(question["_id"], 0)
            if computed.get("answers") != answers or computed.get("likes") != likes:
                question_repo.set_counters(question["_id"], answers, likes)
                fixed_questions.append(str(question["_id"]))

        fixed_answers = []
        for answer in answer_repo.iter_counters():
            computed = answer.get("computed") or {}
            likes = answer_likes.get(answer["_id"], 0)
            if computed.get("likes") != likes:
                answer_repo.set_like_counter(answer["_id"], likes)
                fixed_answers.append(str(answer["_id"]))

        logger.info(f"Counters recomputed: {len(fixed_questions)} questions, {len(fixed_answers)} answers corrected")
        return {"questions": fixed_questions, "answers": fixed_answers}
