# backend/models/student_exam.py
import math
from datetime import datetime, timezone

STATUS_PENDING = "pending"

# history labels
COMPLETED = "Completed"
IN_PROGRESS = "In Progress"
NOT_STARTED = "Not Started"


def key(student_id, exam_id):
    return {"student": student_id, "exam": exam_id}


def _as_number(value):
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    return 0


def score_answers(answers):
    """Return (examScore, totalQuestionsSolved, examDurationByStudent)."""
    total = sum(a.get("answerMarks") or 0 for a in answers)
    duration = sum(_as_number(a.get("answerDuration")) for a in answers)
    return total, len(answers), duration


def new_submission(answers, now=None):
    now = now or datetime.now(timezone.utc)
    score, solved, duration = score_answers(answers)
    return {
        "examStatus": STATUS_PENDING,
        "examScore": score,
        "examDurationByStudent": duration,
        "totalQuestionsSolved": solved,
        "createdAt": now,
        "updatedAt": now,
    }
