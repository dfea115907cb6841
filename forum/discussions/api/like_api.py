"""Like Toggle APIs - Presentation Layer"""
from flask_restful import Resource

from forum.jwt.auth_middleware import token_required, get_acting_user_id
from forum.discussions.services.like.like_service import LikeService
from forum.discussions.utils.formatting.response_formatter import ok
from forum.discussions.exceptions.error_handler import handle_service_error

class QuestionLikeResource(Resource):
    def __init__(self):
        self.service = LikeService()

    @token_required
    def post(self, question_id):
        """Toggle like; response is the question plus ``liked`` when now liked"""
        try:
            return ok(self.service.like_question(get_acting_user_id(), question_id))
        except Exception as e:
            return handle_service_error(e)

class AnswerLikeResource(Resource):
    def __init__(self):
        self.service = LikeService()

    @token_required
    def post(self, answer_id):
        """Toggle like; response is the answer plus ``liked`` when now liked"""
        try:
            return ok(self.service.like_answer(get_acting_user_id(), answer_id))
        except Exception as e:
            return handle_service_error(e)
