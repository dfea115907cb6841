"""Index Optimization Utilities - Database Performance (SoC)"""
import logging

from forum.discussions.repositories.core.repository_factory import RepositoryFactory

logger = logging.getLogger(__name__)

def ensure_indexes():
    """Create the like uniqueness index and the read indexes used by the feeds"""
    factory = RepositoryFactory()
    factory.get_question_repo().ensure_indexes()
    factory.get_answer_repo().ensure_indexes()
    factory.get_like_repo().ensure_indexes()
    logger.info("Discussion indexes ensured")

if __name__ == "__main__":
    from forum.logging_logs.log_config import setup_logging
    setup_logging()
    ensure_indexes()
