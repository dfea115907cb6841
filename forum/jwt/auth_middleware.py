from functools import wraps
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException, NoAuthorizationError
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

def token_required(f):
    """Decorator to require JWT token for API endpoints"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            verify_jwt_in_request()
        except NoAuthorizationError:
            return {"message": "Missing Authorization Header", "error": "NO_AUTH_HEADER"}, 401
        except ExpiredSignatureError:
            return {"message": "Token has expired", "error": "TOKEN_EXPIRED"}, 401
        except (InvalidTokenError, JWTExtendedException):
            return {"message": "Invalid token", "error": "INVALID_TOKEN"}, 401
        return f(*args, **kwargs)
    return decorated_function

def get_acting_user_id():
    """Id of the authenticated user, the JWT subject"""
    return get_jwt_identity()
