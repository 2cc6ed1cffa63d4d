# backend/models/question.py

# projection that hides the answer key from students
PUBLIC_PROJECTION = {"questionAnswer": 0}


def is_correct(question, answer_text):
    # exact match, case-sensitive
    return question.get("questionAnswer") == answer_text


def awarded_marks(question, correct):
    return question.get("questionMarks", 0) if correct else 0
