# services/students_service.py
import logging
from datetime import date, datetime

from mongoengine.errors import NotUniqueError, ValidationError

from models.student import Student

logger = logging.getLogger(__name__)

MIN_USER_ID = -(2 ** 63)
MAX_USER_ID = 2 ** 63 - 1

# API key -> model field
FIELD_MAP = {
    "name": "name",
    "email": "email",
    "gender": "gender",
    "dateOfBirth": "date_of_birth",
    "phone": "phone_number",
    "className": "class_name",
    "section": "section",
    "roll": "roll",
    "address": "address",
    "guardianName": "guardian_name",
    "guardianContact": "guardian_contact",
}


class StudentServiceError(Exception):
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class StudentNotFoundError(StudentServiceError):
    status_code = 404


class StudentConflictError(StudentServiceError):
    status_code = 409


def _parse_date(value):
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"dateOfBirth must be an ISO date (YYYY-MM-DD), got {value!r}")


def _model_fields(data):
    """Pick the known API keys out of `data`, renamed to model fields."""
    fields = {}
    for key, field in FIELD_MAP.items():
        if key in data and data[key] is not None:
            fields[field] = data[key]
    if "date_of_birth" in fields:
        fields["date_of_birth"] = _parse_date(fields["date_of_birth"])
    return fields


def _get_student(user_id):
    # ids beyond BSON int64 can never have been stored
    if user_id is None or not MIN_USER_ID <= user_id <= MAX_USER_ID:
        raise StudentNotFoundError(f"Student {user_id} not found")
    student = Student.objects(user_id=user_id).first()
    if student is None:
        raise StudentNotFoundError(f"Student {user_id} not found")
    return student


def get_all_students(filters):
    qs = Student.objects
    name = (filters.get("name") or "").strip()
    if name:
        qs = qs.filter(name__icontains=name)

    exact = {"className": "class_name", "section": "section", "roll": "roll"}
    for key, field in exact.items():
        value = filters.get(key)
        if value not in (None, ""):
            qs = qs.filter(**{field: str(value)})

    return [s.to_json() for s in qs.order_by("user_id")]


def add_new_student(data):
    student = Student(**_model_fields(data))
    try:
        student.save()
    except NotUniqueError:
        raise StudentConflictError(f"A student with email {student.email} already exists")

    logger.info("Student %s created (email=%s)", student.user_id, student.email)
    return {"message": "Student added successfully", "userId": student.user_id}


def get_student_detail(user_id):
    return _get_student(user_id).to_json()


def update_student(data):
    user_id = data.get("userId")
    student = _get_student(user_id)

    for field, value in _model_fields(data).items():
        setattr(student, field, value)

    try:
        student.save()
    except NotUniqueError:
        raise StudentConflictError(f"A student with email {student.email} already exists")

    logger.info("Student %s updated", user_id)
    return {"message": "Student updated successfully"}


def set_student_status(data):
    student = _get_student(data["userId"])
    student.is_active = bool(data["status"])
    student.status_reviewed_by = data["reviewerId"]
    student.status_changed_at = datetime.utcnow()
    student.save()

    state = "enabled" if student.is_active else "disabled"
    logger.info("Student %s %s by reviewer %s", student.user_id, state, data["reviewerId"])
    return {"message": f"Student {state} successfully"}


def delete_student(user_id):
    student = _get_student(user_id)
    student.delete()
    logger.info("Student %s deleted", user_id)
    return {"message": "Student deleted successfully"}
