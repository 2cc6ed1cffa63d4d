# backend/models/exam.py

# fields a student may see on the exam detail page
DETAIL_FIELDS = (
    "examName", "examCode", "examDate", "examTime", "examDuration",
    "duration", "startDate", "endDate",
    "createdBy", "createdAt", "updatedBy", "updatedAt",
)


def assigned_filter(student_id, exam_id=None):
    query = {"students": student_id}
    if exam_id is not None:
        query["_id"] = exam_id
    return query


def detail_view(exam, questions):
    view = {"_id": exam["_id"]}
    for field in DETAIL_FIELDS:
        if field in exam:
            view[field] = exam[field]
    view["questions"] = questions
    return view


def total_marks(exam, questions):
    if exam.get("examMarks") is not None:
        return exam["examMarks"]
    return sum(q.get("questionMarks") or 0 for q in questions)
