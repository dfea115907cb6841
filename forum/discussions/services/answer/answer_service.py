"""Answer Service - Business Logic Layer"""
import logging
from typing import Dict, List

from forum.discussions.repositories.core.repository_factory import RepositoryFactory
from forum.discussions.utils.security.security_utils import to_object_id
from forum.discussions.utils.validation.input_validator import InputValidator

logger = logging.getLogger(__name__)

class AnswerService:
    def __init__(self):
        self.repo_factory = RepositoryFactory()

    def get_answers_by_question_id(self, question_id: str, user_id: str) -> List[Dict]:
        """Answers of a question, newest first, with creator and the user's like"""
        answers = self.repo_factory.get_answer_repo().get_answers_with_creator(to_object_id(question_id))
        return self.repo_factory.get_like_repo().attach_like_status(answers, to_object_id(user_id), "answer")

    def create_answer(self, user_id: str, question_id: str, data: Dict) -> Dict:
        """Store the answer, then bump the question's answer counter.

        The two writes are independent; a failure between them leaves the
        counter short until recompute_counters runs.
        """
        fields = InputValidator.require_text_fields(data, "body")
        question_oid = to_object_id(question_id)

        answer = self.repo_factory.get_answer_repo().insert_answer(
            question_oid, fields["body"], to_object_id(user_id)
        )
        self.repo_factory.get_question_repo().increment_counter(question_oid, "answers", 1)

        logger.info(f"Answer {answer['_id']} created on question {question_id} by {user_id}")
        return answer
