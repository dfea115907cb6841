"""Answer Repository - Data Access Layer (SoC)"""
from typing import Dict, Iterator, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from forum.db.db_utils import get_collection
from forum.discussions.repositories.answer.answer_pipelines import (
    build_answers_for_question_pipeline, build_answer_count_pipeline
)
from forum.discussions.utils.time.timeutils import now_utc

class AnswerRepo:
    def __init__(self):
        self.collection = get_collection("answers")

    def ensure_indexes(self):
        self.collection.create_index([("questionId", ASCENDING), ("createdAt", DESCENDING)])

    def get_answers_with_creator(self, question_id: ObjectId) -> List[Dict]:
        return list(self.collection.aggregate(build_answers_for_question_pipeline(question_id)))

    def insert_answer(self, question_id: ObjectId, body: str, created_by: ObjectId) -> Dict:
        timestamp = now_utc()
        answer = {
            "questionId": question_id,
            "body": body,
            "createdBy": created_by,
            "computed": {"likes": 0},
            "createdAt": timestamp,
            "updatedAt": timestamp,
        }
        result = self.collection.insert_one(answer)
        return self.collection.find_one({"_id": result.inserted_id})

    def find_by_id(self, answer_id: ObjectId) -> Optional[Dict]:
        return self.collection.find_one({"_id": answer_id})

    def increment_counter(self, answer_id: ObjectId, counter: str, amount: int) -> Optional[Dict]:
        """Atomic $inc on one computed counter, returning the updated document"""
        return self.collection.find_one_and_update(
            {"_id": answer_id},
            {"$inc": {f"computed.{counter}": amount}},
            return_document=ReturnDocument.AFTER
        )

    def count_by_question(self) -> Dict[ObjectId, int]:
        return {row["_id"]: row["count"] for row in self.collection.aggregate(build_answer_count_pipeline())}

    def iter_counters(self) -> Iterator[Dict]:
        return self.collection.find({}, {"computed": 1})

    def set_like_counter(self, answer_id: ObjectId, likes: int):
        self.collection.update_one({"_id": answer_id}, {"$set": {"computed.likes": likes}})
