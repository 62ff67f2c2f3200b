"""
Application error hierarchy.

Routers and the CRUD layer raise these; the handlers registered in
app.api.errors turn them into JSON error responses.
"""

from typing import List, Optional, Union

ErrorMessage = Union[str, List[str]]


class AppError(Exception):
    """Base class for errors that map onto an HTTP status code"""
    status_code: int = 500

    def __init__(self, message: ErrorMessage = "Internal Server Error", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(AppError):
    """400: malformed or semantically invalid input"""
    status_code = 400

    def __init__(self, message: ErrorMessage = "Bad Request"):
        super().__init__(message)


class UnauthorizedError(AppError):
    """401: missing or invalid credentials"""
    status_code = 401

    def __init__(self, message: ErrorMessage = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(AppError):
    """403: authenticated, but lacking the required role"""
    status_code = 403

    def __init__(self, message: ErrorMessage = "Forbidden"):
        super().__init__(message)


class NotFoundError(AppError):
    """404: the requested resource does not exist"""
    status_code = 404

    def __init__(self, message: ErrorMessage = "Not Found"):
        super().__init__(message)
