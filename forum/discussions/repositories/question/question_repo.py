"""Question Repository - Data Access Layer (SoC)"""
from typing import Dict, Iterator, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from forum.db.db_utils import get_collection
from forum.discussions.repositories.question.question_pipelines import (
    build_questions_feed_pipeline, build_question_by_id_pipeline,
    build_top_discussions_pipeline, build_question_search_pipeline
)
from forum.discussions.utils.time.timeutils import now_utc

class QuestionRepo:
    def __init__(self):
        self.collection = get_collection("questions")

    def ensure_indexes(self):
        self.collection.create_index([("createdAt", DESCENDING)])
        self.collection.create_index([("computed.answers", ASCENDING)])

    def get_questions_with_creator(self) -> List[Dict]:
        return list(self.collection.aggregate(build_questions_feed_pipeline()))

    def get_question_with_creator(self, question_id: ObjectId) -> Optional[Dict]:
        results = list(self.collection.aggregate(build_question_by_id_pipeline(question_id)))
        return results[0] if results else None

    def get_top_discussions(self, limit: int) -> List[Dict]:
        return list(self.collection.aggregate(build_top_discussions_pipeline(limit)))

    def search_questions(self, query: Optional[str], skip: int, limit: int) -> List[Dict]:
        return list(self.collection.aggregate(build_question_search_pipeline(query, skip, limit)))

    def insert_question(self, title: str, body: str, created_by: ObjectId) -> Dict:
        timestamp = now_utc()
        question = {
            "title": title,
            "body": body,
            "createdBy": created_by,
            "computed": {"answers": 0, "likes": 0},
            "createdAt": timestamp,
            "updatedAt": timestamp,
        }
        result = self.collection.insert_one(question)
        return self.collection.find_one({"_id": result.inserted_id})

    def find_by_id(self, question_id: ObjectId) -> Optional[Dict]:
        return self.collection.find_one({"_id": question_id})

    def increment_counter(self, question_id: ObjectId, counter: str, amount: int) -> Optional[Dict]:
        """Atomic $inc on one computed counter, returning the updated document"""
        return self.collection.find_one_and_update(
            {"_id": question_id},
            {"$inc": {f"computed.{counter}": amount}},
            return_document=ReturnDocument.AFTER
        )

    def iter_counters(self) -> Iterator[Dict]:
        return self.collection.find({}, {"computed": 1})

    def set_counters(self, question_id: ObjectId, answers: int, likes: int):
        self.collection.update_one(
            {"_id": question_id},
            {"$set": {"computed.answers": answers, "computed.likes": likes}}
        )
