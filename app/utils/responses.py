from flask import jsonify


def ok(data=None, message="success", status=200, redirect=None):
    payload = {"status": "success", "message": message}
    if data is not None:
        payload["data"] = data
    if redirect:
        payload["redirect"] = redirect
    return jsonify(payload), status


def error(message, status=400, code=None, redirect=None, **extra):
    payload = {
        "status": "error",
        "message": message,
        "code": code or status,
    }
    if redirect:
        payload["redirect"] = redirect
    payload.update(extra)
    return jsonify(payload), status


def validation_error_response(errors, redirect=None):
    """Collapse pydantic errors into the error envelope."""
    details = [
        {
            "field": ".".join(str(part) for part in e.get("loc", ())),
            "message": e.get("msg", ""),
        }
        for e in errors
    ]
    fields = ", ".join(d["field"] for d in details if d["field"])
    message = f"Invalid value for: {fields}" if fields else "Invalid input"
    return error(message, status=400, redirect=redirect, errors=details)


def internal_error_response(redirect=None):
    return error(
        "An unexpected error occurred, please try again later",
        status=500,
        redirect=redirect,
    )
