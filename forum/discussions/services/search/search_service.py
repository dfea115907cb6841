"""Search Service - Business Logic Layer"""
from typing import Dict, List, Optional

from forum.discussions.config.settings import SEARCH_PER_PAGE
from forum.discussions.repositories.core.repository_factory import RepositoryFactory
from forum.discussions.utils.pagination.pagination_utils import page_to_skip

class SearchService:
    def __init__(self):
        self.repo_factory = RepositoryFactory()

    def search_questions(self, query: Optional[str], page: int = 1, per_page: int = SEARCH_PER_PAGE) -> List[Dict]:
        """One page of questions matching query, newest first, with creator"""
        return self.repo_factory.get_question_repo().search_questions(
            query, page_to_skip(page, per_page), per_page
        )
