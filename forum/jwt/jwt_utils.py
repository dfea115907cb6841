from flask_jwt_extended import create_access_token
from datetime import timedelta

from forum.discussions.config.settings import JWTConfig

class JWTManager:
    @staticmethod
    def generate_token(user_data, expires_delta=None):
        """Generate JWT access token whose subject is the user id"""
        if expires_delta is None:
            expires_delta = timedelta(minutes=JWTConfig.ACCESS_TOKEN_EXPIRES_MINUTES)

        additional_claims = {
            "email": user_data.get("email"),
            "username": user_data.get("username"),
        }

        return create_access_token(
            identity=str(user_data.get("_id")),
            expires_delta=expires_delta,
            additional_claims=additional_claims,
            fresh=False
        )
