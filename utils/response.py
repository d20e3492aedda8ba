# utils/response.py
from flask import jsonify


def success(status_code=200, data=None, message="Success"):
    body = {
        "success": True,
        "message": message
    }
    if data is not None:
        body["data"] = data
    return jsonify(body), status_code


def created(message, data=None):
    return success(status_code=201, data=data, message=message)


def error(status_code=400, errors=None, message="An error occurred"):
    """
    Build an error envelope.
    `errors` may be a single string or a list of strings; an empty list drops the key.
    """
    body = {
        "success": False,
        "message": message
    }
    if isinstance(errors, str):
        body["errors"] = [errors]
    elif errors:
        body["errors"] = list(errors)
    return jsonify(body), status_code


def validation_error(errors):
    return error(status_code=400, errors=errors, message="Validation failed")


def not_found(message="Resource not found"):
    return error(status_code=404, errors=[message], message="Not Found")


def server_error(message="Internal server error"):
    return error(status_code=500, errors=[message], message="Server Error")
