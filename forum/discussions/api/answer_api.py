"""Answer APIs - Presentation Layer"""
from flask_restful import Resource

from forum.jwt.auth_middleware import token_required, get_acting_user_id
from forum.discussions.services.answer.answer_service import AnswerService
from forum.discussions.utils.validation.input_validator import get_json_data
from forum.discussions.utils.formatting.response_formatter import ok
from forum.discussions.exceptions.error_handler import handle_service_error

class QuestionAnswersResource(Resource):
    def __init__(self):
        self.service = AnswerService()

    @token_required
    def get(self, question_id):
        try:
            return ok(self.service.get_answers_by_question_id(question_id, get_acting_user_id()))
        except Exception as e:
            return handle_service_error(e)

    @token_required
    def post(self, question_id):
        try:
            return ok(self.service.create_answer(get_acting_user_id(), question_id, get_json_data()))
        except Exception as e:
            return handle_service_error(e)
