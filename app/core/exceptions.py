# app/core/exceptions.py

from fastapi import HTTPException, status

# Base Exception
class BaseAPIException(HTTPException):
    """Base class for all custom API exceptions."""
    def __init__(self, status_code: int, detail: str, headers: dict = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


# Registration Exceptions
class MissingRegistrationFieldsException(BaseAPIException):
    """Exception raised when a required registration field is absent or null."""
    def __init__(self, detail="username, email and password are required"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class UserAlreadyExistsException(BaseAPIException):
    """Exception raised when the username or email is already registered."""
    def __init__(self, detail="Username or email already exists"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


# Validation & Input Exceptions
class MalformedRequestException(BaseAPIException):
    """Exception raised when the request body cannot be read as a registration payload."""
    def __init__(self, detail="request body must be a JSON object with string fields"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


# System Exceptions
class InternalServerErrorException(BaseAPIException):
    """Exception raised for internal server errors."""
    def __init__(self, detail="Internal server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
