"""Like Service - Business Logic Layer"""
import logging
from typing import Dict

from pymongo.errors import DuplicateKeyError

from forum.discussions.repositories.core.repository_factory import RepositoryFactory
from forum.discussions.utils.security.security_utils import to_object_id

logger = logging.getLogger(__name__)

class LikeService:
    def __init__(self):
        self.repo_factory = RepositoryFactory()

    def like_question(self, user_id: str, question_id: str) -> Dict:
        """Toggle the user's like on a question"""
        return self._toggle_like(user_id, "question", question_id, self.repo_factory.get_question_repo())

    def like_answer(self, user_id: str, answer_id: str) -> Dict:
        """Toggle the user's like on an answer"""
        return self._toggle_like(user_id, "answer", answer_id, self.repo_factory.get_answer_repo())

    def _toggle_like(self, user_id: str, target_field: str, target_id: str, target_repo) -> Dict:
        """Delete the like row if present, create it otherwise, and move computed.likes with it.

        The counter only moves when this call actually inserted or removed
        the row, so two racing toggles never double count.
        """
        like_repo = self.repo_factory.get_like_repo()
        user_oid = to_object_id(user_id)
        target_oid = to_object_id(target_id)

        liked = like_repo.find_like(user_oid, target_field, target_oid)
        if liked:
            removed = like_repo.delete_like(liked["_id"])
            liked = None
            delta = -1 if removed else 0
        else:
            try:
                liked = like_repo.insert_like(user_oid, target_field, target_oid)
                delta = 1
            except DuplicateKeyError:
                # concurrent toggle inserted the same row first
                liked = like_repo.find_like(user_oid, target_field, target_oid)
                delta = 0

        if delta:
            target = target_repo.increment_counter(target_oid, "likes", delta)
        else:
            target = target_repo.find_by_id(target_oid)

        logger.debug(f"{target_field} {target_id} {'liked' if liked else 'unliked'} by {user_id}")

        result = dict(target or {})
        if liked:
            result["liked"] = liked
        return result
