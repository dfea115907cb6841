from dotenv import load_dotenv
load_dotenv()

from datetime import timedelta

from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_restful import Api, Resource

from forum.discussions.config.settings import JWTConfig
from forum.logging_logs.log_config import setup_logging

# Questions & answers
from forum.discussions.api.question_api import QuestionListResource, TopDiscussionsResource, QuestionDetailResource
from forum.discussions.api.answer_api import QuestionAnswersResource
from forum.discussions.api.like_api import QuestionLikeResource, AnswerLikeResource

# Search feed
from forum.discussions.api.search_api import SearchResource


class HealthCheck(Resource):
    def get(self):
        return {"message": "Discussions API is running"}, 200


class MyFlask(Flask):
    def add_api(self):
        api = Api(self, catch_all_404s=True)
        api.add_resource(HealthCheck, "/")
        # -------------- Question APIs -------------#
        api.add_resource(QuestionListResource, "/api/v1/questions")
        api.add_resource(TopDiscussionsResource, "/api/v1/questions/top")
        api.add_resource(QuestionDetailResource, "/api/v1/questions/<string:question_id>")
        api.add_resource(QuestionAnswersResource, "/api/v1/questions/<string:question_id>/answers")

        # -------------- Like toggle APIs -------------#
        api.add_resource(QuestionLikeResource, "/api/v1/questions/<string:question_id>/like")
        api.add_resource(AnswerLikeResource, "/api/v1/answers/<string:answer_id>/like")

        # -------------- Search APIs -------------#
        api.add_resource(SearchResource, "/api/v1/search")


def create_app(config=None):
    setup_logging()

    app = MyFlask(__name__)
    # Configure JWT
    app.config['JWT_SECRET_KEY'] = JWTConfig.SECRET_KEY
    app.config['JWT_ACCESS_TOKEN_EXPIRES'] = timedelta(minutes=JWTConfig.ACCESS_TOKEN_EXPIRES_MINUTES)
    if config:
        app.config.update(config)
    JWTManager(app)

    # Initialize API routes
    app.add_api()
    CORS(app, supports_credentials=True)
    return app


if __name__ == '__main__':
    create_app().run()
