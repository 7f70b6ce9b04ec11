# backend/shared/exceptions.py
"""
Application error taxonomy.

Services raise these; the app-level handler in ``main`` renders each one as
a single JSON body ``{body_key: message}`` with the matching status code.
"""

from typing import Any, Dict


class AppError(Exception):
    """Base class for every error that maps to an HTTP response."""

    status_code: int = 500
    body_key: str = "msg"
    default_message: str = "Server error"

    def __init__(self, message: str = None, body_key: str = None):
        self.message = message or self.default_message
        if body_key:
            self.body_key = body_key
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {self.body_key: self.message}


# ------------------------------------------------------------
# 🔹 Input
# ------------------------------------------------------------
class ValidationError(AppError):
    status_code = 400
    default_message = "Please fill all required fields."


# ------------------------------------------------------------
# 🔹 Credentials
# ------------------------------------------------------------
class DuplicateCredential(AppError):
    status_code = 400
    default_message = "Email already exists"


class InvalidCredential(AppError):
    status_code = 400
    default_message = "Invalid credentials"


class NotFound(AppError):
    status_code = 404
    default_message = "User not found"


# ------------------------------------------------------------
# 🔹 External faults
# ------------------------------------------------------------
class ServiceError(AppError):
    status_code = 500
    default_message = "Server error"


class DeliveryError(AppError):
    status_code = 500
    body_key = "error"
    default_message = "Failed to send email."
