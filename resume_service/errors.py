"""
Error taxonomy for the resume service.

Every error carries an HTTP status and a stable ``reason`` string so that
clients can branch on it without parsing the human readable message.
"""


class ResumeServiceError(Exception):
    status_code = 500
    reason = "internal_error"
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.reason, "detail": self.message}


class Unauthenticated(ResumeServiceError):
    status_code = 401
    reason = "unauthenticated"
    default_message = "No token provided."


class Forbidden(ResumeServiceError):
    status_code = 403
    reason = "forbidden"
    default_message = "Token is not valid."


class InvalidCredentials(ResumeServiceError):
    status_code = 401
    reason = "invalid_credentials"
    default_message = "Invalid email or password."


class ValidationError(ResumeServiceError):
    status_code = 400
    reason = "validation_error"
    default_message = "Missing or invalid input."


class Conflict(ResumeServiceError):
    status_code = 409
    reason = "conflict"
    default_message = "This email is already registered. Please log in."


class NotFoundOrForbidden(ResumeServiceError):
    status_code = 404
    reason = "not_found"
    default_message = "Record not found or you do not have permission to modify it."


class DataIntegrity(ResumeServiceError):
    status_code = 500
    reason = "data_integrity"
    default_message = "Stored data is inconsistent."


class RenderFailure(ResumeServiceError):
    status_code = 500
    reason = "render_failed"
    default_message = "Failed to generate PDF."


class UpstreamFailure(ResumeServiceError):
    status_code = 503
    reason = "upstream_unavailable"
    default_message = "Database is unavailable."
