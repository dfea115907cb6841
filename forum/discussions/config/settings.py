"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

# Database Configuration
MONGO_URL = os.getenv("DB_URL", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "discussions")

MONGO_CLIENT_CONFIG = {
    'maxPoolSize': safe_int_env("MONGO_MAX_POOL_SIZE", "50"),
    'connectTimeoutMS': 10000,
    'serverSelectionTimeoutMS': 10000,
    'socketTimeoutMS': 30000,
    'retryWrites': True,
    'retryReads': True,
}

# Collection names
COLLECTIONS: Dict[str, str] = {
    'questions': os.getenv("QUESTIONS_COLLECTION", "questions"),
    'answers': os.getenv("ANSWERS_COLLECTION", "answers"),
    'likes': os.getenv("LIKES_COLLECTION", "likes"),
    'users': os.getenv("USERS_COLLECTION", "users"),
}

# Feed Configuration
SEARCH_PER_PAGE = safe_int_env("SEARCH_PER_PAGE", "5")
TOP_DISCUSSIONS_LIMIT = safe_int_env("TOP_DISCUSSIONS_LIMIT", "5")
MAX_PAGE_SIZE = safe_int_env("MAX_PAGE_SIZE", "100")

# Auth Configuration
class JWTConfig:
    SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me-in-production")
    ACCESS_TOKEN_EXPIRES_MINUTES = safe_int_env("JWT_ACCESS_TOKEN_EXPIRES", "60")

# Logging Configuration
class LogConfig:
    LEVEL = os.getenv("LOG_LEVEL", "INFO")
    DIR = os.getenv("LOG_DIR", os.path.join(os.getcwd(), "logs"))
    FILE_NAME = "discussions.log"
    MAX_BYTES = 30 * 1024 * 1024
    BACKUP_COUNT = 5

# Error message truncation for server error responses
MAX_ERROR_MESSAGE_LENGTH = 500
