# backend/services/exam_workflow.py
"""
Student exam workflow: listing, answering, submitting and reading back results.

Every function takes the Mongo database handle and the authenticated
``StudentContext`` explicitly; nothing here touches the Flask request.
"""
import logging
from collections import defaultdict
from datetime import datetime

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from database import EXAMS, QUESTIONS, STUDENT_ANSWERS, STUDENT_EXAMS, UNIVERSITIES
from models import exam as exam_model
from models import question as question_model
from models import student_answer, student_exam
from utils.errors import NotFoundError, ValidationError
from utils.validators import object_id

logger = logging.getLogger(__name__)


def _assigned_exam(db, student, exam_oid):
    exam = db[EXAMS].find_one(exam_model.assigned_filter(student.id, exam_oid))
    if exam is None:
        raise NotFoundError("Exam not found")
    return exam


# =====================================================
# LISTING / DETAIL
# =====================================================
def list_my_exams(db, student):
    return list(db[EXAMS].find(exam_model.assigned_filter(student.id)))


def get_exam_details(db, student, exam_id):
    """Exam metadata plus its questions, or ``[]`` when not assigned to the caller."""
    exam_oid = object_id(exam_id, "exam id")

    exam = db[EXAMS].find_one(exam_model.assigned_filter(student.id, exam_oid))
    if exam is None:
        return []

    questions = list(db[QUESTIONS].find({"exam": exam_oid}, question_model.PUBLIC_PROJECTION))
    return [exam_model.detail_view(exam, questions)]


# =====================================================
# ANSWERS
# =====================================================
def record_answer(db, student, exam_id, question_id, payload):
    """
    Create or update the caller's answer to one question.

    Returns ``(record, created)``. The write is a single upsert on the
    (student, exam, question) key, backed by a unique index.
    """
    exam_oid = object_id(exam_id, "exam id")
    question_oid = object_id(question_id, "question id")
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    payload = student_answer.clean_payload(payload)

    _assigned_exam(db, student, exam_oid)

    question = db[QUESTIONS].find_one({"_id": question_oid, "exam": exam_oid})
    if question is None:
        raise NotFoundError("Question not found")

    answers = db[STUDENT_ANSWERS]
    key = student_answer.key(student.id, exam_oid, question_oid)
    update = student_answer.upsert_update(question, payload)

    try:
        before = answers.find_one_and_update(
            key, update, upsert=True, return_document=ReturnDocument.BEFORE
        )
    except DuplicateKeyError:
        # lost an insert race; the other request's record exists now
        before = answers.find_one_and_update(key, update, return_document=ReturnDocument.BEFORE)

    created = before is None
    record = answers.find_one(key)
    logger.info(
        "Answer %s: student=%s exam=%s question=%s correct=%s",
        "created" if created else "updated",
        student.id, exam_oid, question_oid, record["isCorrect"],
    )
    return record, created


# =====================================================
# SUBMISSION
# =====================================================
def submit_exam(db, student, exam_id):
    """
    Finalize the caller's attempt. Returns ``(record, created)``.

    A second call for the same exam returns the first record untouched.
    """
    exam_oid = object_id(exam_id, "exam id")
    _assigned_exam(db, student, exam_oid)

    answers = list(db[STUDENT_ANSWERS].find({"student": student.id, "exam": exam_oid}))
    doc = student_exam.new_submission(answers)

    submissions = db[STUDENT_EXAMS]
    key = student_exam.key(student.id, exam_oid)
    try:
        previous = submissions.find_one_and_update(key, {"$setOnInsert": doc}, upsert=True)
    except DuplicateKeyError:
        previous = submissions.find_one(key)

    if previous is not None:
        logger.info("Exam already submitted: student=%s exam=%s", student.id, exam_oid)
        return previous, False

    record = submissions.find_one(key)
    logger.info(
        "Exam submitted: student=%s exam=%s score=%s solved=%s",
        student.id, exam_oid, record["examScore"], record["totalQuestionsSolved"],
    )
    return record, True


# =====================================================
# RESULTS
# =====================================================
def get_exam_result(db, student, exam_id):
    exam_oid = object_id(exam_id, "exam id")

    submission = db[STUDENT_EXAMS].find_one(student_exam.key(student.id, exam_oid))
    if submission is None:
        return {"result": None, "questions": []}

    answers = {
        a["question"]: a
        for a in db[STUDENT_ANSWERS].find({"student": student.id, "exam": exam_oid})
    }

    questions = []
    for q in db[QUESTIONS].find({"exam": exam_oid}):
        questions.append({
            "_id": q["_id"],
            "questionText": q.get("questionText"),
            "questionAnswer": q.get("questionAnswer"),
            "questionMarks": q.get("questionMarks"),
            "answer": answers.get(q["_id"]),
        })

    return {"result": submission, "questions": questions}


# =====================================================
# HISTORY / DASHBOARD
# =====================================================
def _answers_by_exam(db, student):
    grouped = defaultdict(list)
    for a in db[STUDENT_ANSWERS].find({"student": student.id}):
        grouped[a["exam"]].append(a)
    return grouped


def _summaries(db, student, exams, grouped):
    exam_ids = [e["_id"] for e in exams]

    questions = defaultdict(list)
    for q in db[QUESTIONS].find({"exam": {"$in": exam_ids}}, {"exam": 1, "questionMarks": 1}):
        questions[q["exam"]].append(q)

    uni_ids = list({e["university"] for e in exams if e.get("university") is not None})
    universities = {
        u["_id"]: u.get("universityName")
        for u in db[UNIVERSITIES].find({"_id": {"$in": uni_ids}})
    }

    submitted = {
        s["exam"]
        for s in db[STUDENT_EXAMS].find({"student": student.id, "exam": {"$in": exam_ids}})
    }

    rows = []
    for exam in exams:
        answers = grouped.get(exam["_id"], [])
        # legacy rows may hold non-datetime answerTime values
        times = [a["answerTime"] for a in answers if isinstance(a.get("answerTime"), datetime)]

        if exam["_id"] in submitted:
            status = student_exam.COMPLETED
        elif answers:
            status = student_exam.IN_PROGRESS
        else:
            status = student_exam.NOT_STARTED

        rows.append({
            "examId": exam["_id"],
            "examName": exam.get("examName"),
            "universityName": universities.get(exam.get("university")),
            "totalScore": sum(a.get("answerMarks") or 0 for a in answers if a.get("isCorrect")),
            "totalMarks": exam_model.total_marks(exam, questions[exam["_id"]]),
            "totalQuestions": len(answers),
            "completedDate": max(times) if times else None,
            "status": status,
        })
    return rows


def list_attempted_exams(db, student):
    """One summary row per exam the caller has answered at least one question of."""
    grouped = _answers_by_exam(db, student)
    if not grouped:
        return []

    exams = list(db[EXAMS].find({"_id": {"$in": list(grouped)}}))
    rows = _summaries(db, student, exams, grouped)
    rows.sort(key=lambda r: (r["completedDate"] is not None, r["completedDate"]), reverse=True)
    return rows


def get_dashboard(db, student):
    exams = list_my_exams(db, student)
    grouped = _answers_by_exam(db, student)

    rows = _summaries(db, student, exams, grouped) if exams else []
    for row in rows:
        row["answers"] = grouped.get(row["examId"], [])

    return {
        "exams": rows,
        "assignedExams": len(rows),
        "attemptedExams": sum(1 for r in rows if r["totalQuestions"]),
        "submittedExams": sum(1 for r in rows if r["status"] == student_exam.COMPLETED),
    }
