"""Search API - Presentation Layer"""
from flask_restful import Resource

from forum.discussions.services.search.search_service import SearchService
from forum.discussions.utils.validation.input_validator import get_optional_query_params
from forum.discussions.utils.pagination.pagination_utils import get_pagination_params
from forum.discussions.utils.formatting.response_formatter import ok
from forum.discussions.exceptions.error_handler import handle_service_error

class SearchResource(Resource):
    def __init__(self):
        self.service = SearchService()

    def get(self):
        """One page of the search feed: ?query=&page=&perPage="""
        try:
            params = get_optional_query_params(query=None, page="1", perPage=None)
            page, per_page = get_pagination_params(params["page"], params["perPage"])
            return ok(self.service.search_questions(params["query"], page, per_page))
        except Exception as e:
            return handle_service_error(e)
