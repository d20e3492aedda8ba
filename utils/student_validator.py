# utils/student_validator.py
import math
import re
from collections.abc import Mapping
from typing import List, NamedTuple, Optional

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class ValidationResult(NamedTuple):
    errors: List[str]

    @property
    def is_valid(self) -> bool:
        return not self.errors


def parse_id(value) -> Optional[int]:
    """
    Coerce an identifier to int.
    Strings keep their leading integer ("12abc" -> 12, "abc" -> None),
    numbers are truncated, anything else yields None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def is_valid_id(value) -> bool:
    parsed = parse_id(value)
    return parsed is not None and parsed > 0


def is_blank(value) -> bool:
    """None, "", False, 0 and NaN count as missing. "0" does not."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    return False


def is_valid_email(email) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def _check_id(student_id, errors):
    if is_blank(student_id):
        errors.append("Student ID is required")
    if not is_valid_id(student_id):
        errors.append("Student ID must be a valid number")


def validate_create_student(data) -> ValidationResult:
    if not isinstance(data, Mapping):
        return ValidationResult(["Invalid request body"])

    errors = []
    name = data.get("name")
    if not isinstance(name, str) or name.strip() == "":
        errors.append("Name is required and must be a valid string")

    email = data.get("email")
    if not isinstance(email, str) or email == "":
        errors.append("Email is required and must be a valid string")
    elif not is_valid_email(email):
        errors.append("Email must be in a valid format")

    return ValidationResult(errors)


def validate_update_student(data, student_id) -> ValidationResult:
    errors = []
    _check_id(student_id, errors)
    if not isinstance(data, Mapping):
        errors.append("Invalid request body")
    return ValidationResult(errors)


def validate_status_change(data, student_id) -> ValidationResult:
    errors = []
    _check_id(student_id, errors)

    # non-mapping payloads are read as empty rather than rejected outright
    if not isinstance(data, Mapping):
        data = {}

    if data.get("status") is None:
        errors.append("Status is required")

    reviewer_id = data.get("reviewerId")
    if is_blank(reviewer_id):
        errors.append("Reviewer ID is required")
    elif not is_valid_id(reviewer_id):
        errors.append("Reviewer ID must be a valid number")

    return ValidationResult(errors)


def validate_student_id(student_id) -> ValidationResult:
    errors = []
    _check_id(student_id, errors)
    return ValidationResult(errors)


def validate_query_params(query) -> ValidationResult:
    # filters are all optional; shape checks go here when needed
    return ValidationResult([])
