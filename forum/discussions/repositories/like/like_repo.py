"""Like Repository - Data Access Layer (SoC)"""
from typing import Dict, Iterable, List, Optional

from bson import ObjectId
from pymongo import ASCENDING

from forum.db.db_utils import get_collection
from forum.discussions.utils.time.timeutils import now_utc

LIKE_TARGETS = ("question", "answer")

class LikeRepo:
    def __init__(self):
        self.collection = get_collection("likes")

    @staticmethod
    def _target_filter(user_id: ObjectId, target_field: str, target_id: ObjectId) -> Dict:
        if target_field not in LIKE_TARGETS:
            raise ValueError(f"Unknown like target: {target_field}")
        return {target_field: target_id, "likedBy": user_id}

    def ensure_indexes(self):
        """One row per (user, question) or (user, answer); the unused target is stored as null"""
        self.collection.create_index(
            [("likedBy", ASCENDING), ("question", ASCENDING), ("answer", ASCENDING)],
            unique=True,
            name="uq_like_user_target"
        )

    def find_like(self, user_id: ObjectId, target_field: str, target_id: ObjectId) -> Optional[Dict]:
        return self.collection.find_one(self._target_filter(user_id, target_field, target_id))

    def insert_like(self, user_id: ObjectId, target_field: str, target_id: ObjectId) -> Dict:
        """Insert a like row. Raises DuplicateKeyError when the row already exists."""
        like = {
            "question": None,
            "answer": None,
            "likedBy": user_id,
            "createdAt": now_utc(),
        }
        like.update(self._target_filter(user_id, target_field, target_id))
        result = self.collection.insert_one(like)
        like["_id"] = result.inserted_id
        return like

    def delete_like(self, like_id: ObjectId) -> int:
        """Delete one like row, returning how many rows were actually removed"""
        return self.collection.delete_one({"_id": like_id}).deleted_count

    def find_likes_by_user(self, user_id: ObjectId, target_field: str, target_ids: Iterable[ObjectId]) -> Dict[ObjectId, Dict]:
        """Single query for the user's likes on many targets, keyed by target id"""
        ids = list(target_ids)
        if not ids:
            return {}
        cursor = self.collection.find({target_field: {"$in": ids}, "likedBy": user_id})
        return {like[target_field]: like for like in cursor}

    def attach_like_status(self, docs: List[Dict], user_id: ObjectId, target_field: str) -> List[Dict]:
        """Set ``liked`` on every document the user liked; leave the key absent otherwise"""
        likes = self.find_likes_by_user(user_id, target_field, (doc["_id"] for doc in docs))
        for doc in docs:
            like = likes.get(doc["_id"])
            if like is not None:
                doc["liked"] = like
        return docs

    def count_by_target(self, target_field: str) -> Dict[ObjectId, int]:
        """Number of like rows per target id"""
        pipeline = [
            {"$match": {target_field: {"$ne": None}}},
            {"$group": {"_id": f"${target_field}", "count": {"$sum": 1}}}
        ]
        return {row["_id"]: row["count"] for row in self.collection.aggregate(pipeline)}
