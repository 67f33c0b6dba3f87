"""
Custom error classes and error handling.
"""


class APIError(Exception):
    """Base API error class."""
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'message': self.message,
            'httpStatus': self.status_code,
        }


class UnauthorizedError(APIError):
    """No identity, or an invalid one, on a protected operation."""
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, status_code=401)


class NotFoundError(APIError):
    """Resource not found (or not owned by the caller)."""
    code = "NOT_FOUND"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class InvalidInputError(APIError):
    """Malformed request body or missing required field."""
    code = "BAD_REQUEST"

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=400)


class MethodNotSupportedError(APIError):
    """Procedure called with the wrong HTTP method."""
    code = "METHOD_NOT_SUPPORTED"

    def __init__(self, message: str = "Method not supported"):
        super().__init__(message, status_code=405)


class UpstreamServiceError(APIError):
    """The hosted language model call failed for any reason."""
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = "AI service error. Please try again."):
        super().__init__(message, status_code=500)
