"""Question APIs - Presentation Layer"""
from flask_restful import Resource

from forum.jwt.auth_middleware import token_required, get_acting_user_id
from forum.discussions.services.question.question_service import QuestionService
from forum.discussions.utils.validation.input_validator import get_json_data
from forum.discussions.utils.formatting.response_formatter import ok
from forum.discussions.exceptions.error_handler import handle_service_error

class QuestionListResource(Resource):
    def __init__(self):
        self.service = QuestionService()

    @token_required
    def get(self):
        """All questions with like status and creator"""
        try:
            return ok(self.service.get_questions(get_acting_user_id()))
        except Exception as e:
            return handle_service_error(e)

    @token_required
    def post(self):
        """Create a question authored by the acting user"""
        try:
            return ok(self.service.create_question(get_acting_user_id(), get_json_data()))
        except Exception as e:
            return handle_service_error(e)

class TopDiscussionsResource(Resource):
    def __init__(self):
        self.service = QuestionService()

    def get(self):
        try:
            return ok(self.service.get_top_discussions())
        except Exception as e:
            return handle_service_error(e)

class QuestionDetailResource(Resource):
    def __init__(self):
        self.service = QuestionService()

    @token_required
    def get(self, question_id):
        """Single question, data is null when it does not exist"""
        try:
            return ok(self.service.get_question_by_id(question_id, get_acting_user_id()))
        except Exception as e:
            return handle_service_error(e)
