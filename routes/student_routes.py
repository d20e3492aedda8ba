# routes/student_routes.py
import logging
from flask import Blueprint, request

from services import students_service
from utils import response
from utils.student_validator import (
    parse_id,
    validate_create_student,
    validate_query_params,
    validate_status_change,
    validate_student_id,
    validate_update_student,
)

logger = logging.getLogger(__name__)

bp = Blueprint("students_bp", __name__, url_prefix="/students")

LIST_FILTERS = ("name", "className", "section", "roll")


def _rejected(validation):
    logger.debug("%s %s rejected: %s", request.method, request.path, validation.errors)
    return response.validation_error(validation.errors)


@bp.route("", methods=["GET"])
def list_students():
    """
    GET /students?name=&className=&section=&roll=
    All filters optional. `name` is a partial match, the rest are exact.
    """
    validation = validate_query_params(request.args)
    if not validation.is_valid:
        return _rejected(validation)

    filters = {key: request.args.get(key) for key in LIST_FILTERS}
    students = students_service.get_all_students(filters)

    return response.success(
        status_code=200,
        data=students,
        message="Students retrieved successfully"
    )


@bp.route("", methods=["POST"])
def add_student():
    """
    POST /students
    body: { "name": "...", "email": "...", "className": "...", "section": "...", "roll": "..." }
    """
    data = request.get_json(silent=True)

    validation = validate_create_student(data)
    if not validation.is_valid:
        return _rejected(validation)

    result = students_service.add_new_student(data)
    return response.created(result["message"])


@bp.route("/<student_id>", methods=["PUT"])
def update_student(student_id):
    """
    PUT /students/<student_id>
    body: any subset of the student fields
    """
    data = request.get_json(silent=True)

    validation = validate_update_student(data, student_id)
    if not validation.is_valid:
        return _rejected(validation)

    payload = dict(data, userId=parse_id(student_id))
    result = students_service.update_student(payload)

    return response.success(status_code=200, message=result["message"])


@bp.route("/<student_id>", methods=["GET"])
def get_student_detail(student_id):
    """GET /students/<student_id>"""
    validation = validate_student_id(student_id)
    if not validation.is_valid:
        return _rejected(validation)

    student = students_service.get_student_detail(parse_id(student_id))

    return response.success(
        status_code=200,
        data=student,
        message="Student details retrieved successfully"
    )


@bp.route("/<student_id>/status", methods=["POST"])
def change_student_status(student_id):
    """
    POST /students/<student_id>/status
    body: { "status": true|false, "reviewerId": 3 }
    """
    data = request.get_json(silent=True) or {}
    status = data.get("status") if isinstance(data, dict) else None
    reviewer_id = data.get("reviewerId") if isinstance(data, dict) else None

    validation = validate_status_change({"status": status, "reviewerId": reviewer_id}, student_id)
    if not validation.is_valid:
        return _rejected(validation)

    result = students_service.set_student_status({
        "userId": parse_id(student_id),
        "reviewerId": parse_id(reviewer_id),
        "status": bool(status)
    })

    return response.success(status_code=200, message=result["message"])


@bp.route("/<student_id>", methods=["DELETE"])
def delete_student(student_id):
    """DELETE /students/<student_id>"""
    validation = validate_student_id(student_id)
    if not validation.is_valid:
        return _rejected(validation)

    result = students_service.delete_student(parse_id(student_id))

    return response.success(status_code=200, message=result["message"])
