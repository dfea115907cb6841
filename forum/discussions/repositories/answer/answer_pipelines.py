"""Answer Domain Pipelines - Answer DB Queries (SoC)"""
from typing import List, Dict

from bson import ObjectId

from forum.discussions.repositories.core.common_pipelines import build_lookup_user_stages, NEWEST_FIRST

def build_answers_for_question_pipeline(question_id: ObjectId) -> List[Dict]:
    """Answers of one question with creator, newest first"""
    return [
        {"$match": {"questionId": question_id}},
        *build_lookup_user_stages("createdBy"),
        {"$sort": NEWEST_FIRST}
    ]

def build_answer_count_pipeline() -> List[Dict]:
    """Number of answers per question"""
    return [
        {"$group": {"_id": "$questionId", "count": {"$sum": 1}}}
    ]
