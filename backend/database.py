# backend/database.py
import logging

from flask import current_app
from pymongo import ASCENDING, MongoClient

logger = logging.getLogger(__name__)

# COLLECTIONS
EXAMS = "exams"
QUESTIONS = "questions"
UNIVERSITIES = "universities"
STUDENT_ANSWERS = "studentanswers"   # answer ledger
STUDENT_EXAMS = "studentexams"       # submission records


def init_db(app, client=None):
    if client is None:
        uri = app.config.get("MONGO_URI")
        if not uri:
            raise RuntimeError("MONGO_URI environment variable not set")
        client = MongoClient(uri)

    db = client[app.config["MONGO_DB_NAME"]]
    app.extensions["mongo_client"] = client
    app.extensions["mongo_db"] = db

    ensure_indexes(db)
    logger.info("Mongo database '%s' ready", db.name)
    return db


def ensure_indexes(db):
    # one answer per (student, exam, question), one submission per (student, exam)
    db[STUDENT_ANSWERS].create_index(
        [("student", ASCENDING), ("exam", ASCENDING), ("question", ASCENDING)],
        unique=True,
        name="uniq_student_exam_question",
    )
    db[STUDENT_EXAMS].create_index(
        [("student", ASCENDING), ("exam", ASCENDING)],
        unique=True,
        name="uniq_student_exam",
    )
    db[QUESTIONS].create_index([("exam", ASCENDING)], name="exam_questions")
    db[EXAMS].create_index([("students", ASCENDING)], name="exam_students")


def get_db():
    return current_app.extensions["mongo_db"]
