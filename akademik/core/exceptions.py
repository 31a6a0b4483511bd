# akademik/core/exceptions.py
"""Custom exceptions for the akademik application."""
from fastapi import HTTPException
from typing import Any, Dict, Optional


class AkademikException(HTTPException):
    """Base exception for akademik application."""
    def __init__(
        self,
        status_code: int,
        detail: Any,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class NotFoundError(AkademikException):
    """Raised when a referenced record does not exist."""
    def __init__(self, resource: str, id: Any):
        self.resource = resource
        self.id = id
        super().__init__(
            status_code=404,
            detail=f"{resource} with id {id} not found"
        )

