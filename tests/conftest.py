import sys
from pathlib import Path

import mongomock
import pytest
from bson import ObjectId


BACKEND_DIR = Path(__file__).resolve().parents[1] / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from app import create_app  # noqa: E402
from config import TestConfig  # noqa: E402
from database import get_db  # noqa: E402
from utils.auth import StudentContext  # noqa: E402
from utils.jwt_manager import create_token  # noqa: E402


STUDENT_ID = ObjectId()
OTHER_STUDENT_ID = ObjectId()
UNIVERSITY_ID = ObjectId()
EXAM_ID = ObjectId()
OTHER_EXAM_ID = ObjectId()
Q1_ID = ObjectId()
Q2_ID = ObjectId()
Q3_ID = ObjectId()
FOREIGN_Q_ID = ObjectId()


@pytest.fixture
def app():
    app = create_app(TestConfig, mongo_client=mongomock.MongoClient())
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return get_db()


@pytest.fixture
def student():
    return StudentContext(id=STUDENT_ID)


@pytest.fixture
def seeded(db):
    db.universities.insert_one({"_id": UNIVERSITY_ID, "universityName": "State University"})
    db.exams.insert_many([
        {
            "_id": EXAM_ID,
            "examName": "Algebra Midterm",
            "examCode": "ALG-101",
            "examDuration": 60,
            "university": UNIVERSITY_ID,
            "students": [STUDENT_ID],
        },
        {
            "_id": OTHER_EXAM_ID,
            "examName": "Physics Final",
            "examCode": "PHY-201",
            "examMarks": 50,
            "university": UNIVERSITY_ID,
            "students": [OTHER_STUDENT_ID],
        },
    ])
    db.questions.insert_many([
        {"_id": Q1_ID, "exam": EXAM_ID, "questionText": "2 + 2?",
         "questionAnswer": "B", "questionMarks": 5},
        {"_id": Q2_ID, "exam": EXAM_ID, "questionText": "3 * 3?",
         "questionAnswer": "C", "questionMarks": 4},
        {"_id": Q3_ID, "exam": EXAM_ID, "questionText": "10 / 2?",
         "questionAnswer": "A", "questionMarks": 3},
        {"_id": FOREIGN_Q_ID, "exam": OTHER_EXAM_ID, "questionText": "F = ?",
         "questionAnswer": "ma", "questionMarks": 10},
    ])
    return db


@pytest.fixture
def auth_headers(app):
    return {"Authorization": f"Bearer {create_token(STUDENT_ID)}"}


@pytest.fixture
def other_auth_headers(app):
    return {"Authorization": f"Bearer {create_token(OTHER_STUDENT_ID)}"}


def answer_payload(text, **overrides):
    payload = {
        "answerText": text,
        "answerDuration": 12,
        "answerMarks": 999,
        "isAnswered": True,
        "answerTime": "2024-05-01T10:00:00Z",
    }
    payload.update(overrides)
    return payload
