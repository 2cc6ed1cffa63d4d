# backend/config.py
import os


def _split_origins(raw):
    return [o.strip() for o in raw.split(",") if o.strip()]


class Config:
    # =====================================================
    # DATABASE
    # =====================================================
    MONGO_URI = os.getenv("MONGO_URI")
    MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "exam_portal_db")

    # =====================================================
    # AUTH (tokens are issued by the main application)
    # =====================================================
    JWT_SECRET = os.getenv("JWT_SECRET", "CHANGE_THIS_SECRET")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

    # =====================================================
    # MISC
    # =====================================================
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = _split_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000"))
    TESTING = False


class TestConfig(Config):
    TESTING = True
    MONGO_URI = "mongodb://localhost:27017"
    MONGO_DB_NAME = "exam_portal_test"
    JWT_SECRET = "test-secret"
    LOG_LEVEL = "DEBUG"
