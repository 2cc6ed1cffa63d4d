# backend/routes/student_exam_routes.py

from flask import Blueprint, request

from database import get_db
from services import exam_workflow
from utils.auth import student_required
from utils.responses import api_response

student_exam = Blueprint("student_exam", __name__)


# =====================================================
# ✅ MY EXAMS
# =====================================================
@student_exam.get("/exams")
@student_required
def get_my_exams(student):
    exams = exam_workflow.list_my_exams(get_db(), student)
    return api_response("Exams retrieved successfully", {"exams": exams})


# =====================================================
# ✅ EXAM DETAILS (+ QUESTIONS, NO ANSWER KEY)
# =====================================================
@student_exam.get("/exams/<exam_id>")
@student_required
def get_exam_details(exam_id, student):
    exam = exam_workflow.get_exam_details(get_db(), student, exam_id)
    return api_response("Exam details retrieved successfully", {"exam": exam})


# =====================================================
# ✅ ANSWER ONE QUESTION (CREATE OR UPDATE)
# =====================================================
@student_exam.post("/exams/<exam_id>/questions/<question_id>/answer")
@student_required
def submit_mcq_answer(exam_id, question_id, student):
    payload = request.get_json(silent=True)
    answer, created = exam_workflow.record_answer(
        get_db(), student, exam_id, question_id, payload
    )

    if created:
        return api_response("Answer created successfully", {"answer": answer}, status=201)
    return api_response("Answer updated successfully", {"answer": answer})


# =====================================================
# ✅ SUBMIT EXAM
# =====================================================
@student_exam.post("/exams/<exam_id>/submit")
@student_required
def submit_exam(exam_id, student):
    submission, created = exam_workflow.submit_exam(get_db(), student, exam_id)
    message = "Exam submitted successfully" if created else "Exam already submitted"
    return api_response(message, {"submission": submission})


# =====================================================
# ✅ EXAM RESULT
# =====================================================
@student_exam.get("/exams/<exam_id>/result")
@student_required
def get_exam_result(exam_id, student):
    result = exam_workflow.get_exam_result(get_db(), student, exam_id)
    return api_response("Exam result viewed successfully", result)


# =====================================================
# ✅ ATTEMPTED EXAMS (HISTORY)
# =====================================================
@student_exam.get("/attempted-exams")
@student_required
def attempted_exams(student):
    exams = exam_workflow.list_attempted_exams(get_db(), student)
    return api_response("Exams attempted successfully", {"exams": exams})


# =====================================================
# ✅ DASHBOARD
# =====================================================
@student_exam.get("/dashboard")
@student_required
def get_student_dashboard(student):
    dashboard = exam_workflow.get_dashboard(get_db(), student)
    return api_response("Student dashboard retrieved successfully", {"dashboard": dashboard})
