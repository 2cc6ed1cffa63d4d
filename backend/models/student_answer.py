# backend/models/student_answer.py
from datetime import datetime, timezone

from models.question import awarded_marks, is_correct
from utils.validators import (
    require_bool, require_datetime, require_fields, require_number, require_str,
)

# body fields a client must send when answering a question
PAYLOAD_FIELDS = ("answerText", "answerDuration", "answerMarks", "isAnswered", "answerTime")


def key(student_id, exam_id, question_id):
    return {"student": student_id, "exam": exam_id, "question": question_id}


def clean_payload(payload):
    require_fields(payload, *PAYLOAD_FIELDS)
    return {
        "answerText": require_str(payload, "answerText"),
        "answerDuration": require_number(payload, "answerDuration"),
        "answerMarks": require_number(payload, "answerMarks"),
        "isAnswered": require_bool(payload, "isAnswered"),
        "answerTime": require_datetime(payload, "answerTime"),
    }


def upsert_update(question, payload, now=None):
    """
    Build the update for one (student, exam, question) answer from a cleaned payload.

    Correctness and marks always come from the question; the client's
    ``answerMarks`` is accepted in the payload but never stored.
    """
    now = now or datetime.now(timezone.utc)
    correct = is_correct(question, payload["answerText"])

    return {
        "$set": {
            "answerText": payload["answerText"],
            "answerDuration": payload["answerDuration"],
            "answerMarks": awarded_marks(question, correct),
            "isCorrect": correct,
            "isAnswered": payload["isAnswered"],
            "answerTime": payload["answerTime"],
            "updatedAt": now,
        },
        "$setOnInsert": {"createdAt": now},
    }
