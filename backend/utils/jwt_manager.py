# backend/utils/jwt_manager.py
import jwt
from datetime import datetime, timedelta, timezone
from flask import current_app


def create_token(student_id, hours=8):
    payload = {
        "student_id": str(student_id),
        "exp": datetime.now(timezone.utc) + timedelta(hours=hours),
    }
    cfg = current_app.config
    return jwt.encode(payload, cfg["JWT_SECRET"], algorithm=cfg["JWT_ALGORITHM"])


def decode_token(token):
    cfg = current_app.config
    return jwt.decode(token, cfg["JWT_SECRET"], algorithms=[cfg["JWT_ALGORITHM"]])
