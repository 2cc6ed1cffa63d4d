# backend/utils/auth.py
import logging
from dataclasses import dataclass
from functools import wraps

import jwt
from bson import ObjectId
from flask import request

from utils.errors import UnauthorizedError
from utils.jwt_manager import decode_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentContext:
    """The authenticated caller, handed to every student handler."""
    id: ObjectId


def _bearer_token(req):
    header = req.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        return None
    return header[len("Bearer "):].strip() or None


def student_required(f):
    """Resolve the bearer token and pass ``student=StudentContext`` to the view."""

    @wraps(f)
    def decorated(*args, **kwargs):
        token = _bearer_token(request)
        if not token:
            logger.warning("Token is missing from request headers.")
            raise UnauthorizedError("Token is missing")

        try:
            claims = decode_token(token)
        except jwt.ExpiredSignatureError:
            logger.info("Token has expired.")
            raise UnauthorizedError("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning("Token is invalid: %s", e)
            raise UnauthorizedError("Token is invalid")

        student_id = claims.get("student_id")
        if not student_id or not ObjectId.is_valid(student_id):
            logger.warning("Token carries no usable student_id: %r", student_id)
            raise UnauthorizedError("Token is invalid")

        kwargs["student"] = StudentContext(id=ObjectId(student_id))
        return f(*args, **kwargs)

    return decorated
