"""Custom exceptions shared across the API"""
from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Raised when client-supplied data breaks a request contract"""
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class PersistenceError(HTTPException):
    """Raised when a storage operation fails"""
    def __init__(self, detail: str = "Storage operation failed"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class RequestBodyTooLargeException(HTTPException):
    """Raised when a request body exceeds the configured ceiling"""
    def __init__(self, max_bytes: int):
        super().__init__(
            status_code=413,
            detail=f"Request body exceeds {max_bytes} bytes"
        )
