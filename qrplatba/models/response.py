"""
Response models for QR Platba API.
"""
from enum import Enum
from typing import Dict, Optional, Any
from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Kind of a field validation failure."""
    REQUIRED = "required"
    FORMAT = "format"


class FieldError(BaseModel):
    """
    Validation failure of a single request field.

    Attributes:
        message: Human readable description of the problem
        error_kind: Whether the field is missing or malformed
    """
    message: str
    error_kind: ErrorKind


# Field name -> error; a field without an entry passed validation
ValidationErrorReport = Dict[str, FieldError]


class QRPlatbaResponse(BaseModel):
    """
    Response model for a generated payment QR code.

    Attributes:
        success: Whether the generation was successful
        qr_string: SPD descriptor encoded in the QR code
        qr_code: PNG image of the QR code as a data URL
    """
    success: bool = True
    qr_string: str
    qr_code: Optional[str] = None


class ErrorResponse(BaseModel):
    """
    Error response model.

    Attributes:
        success: Always False for error responses
        error: Error message
        details: Additional error details
    """
    success: bool = False
    error: str
    details: Optional[Dict[str, Any]] = None
