"""
API routes for QR Platba generation.
"""
import logging
from typing import Dict, Any
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from qrplatba.models.request import PaymentRequest
from qrplatba.models.response import (
    ErrorKind,
    ErrorResponse,
    FieldError,
    QRPlatbaResponse,
    ValidationErrorReport,
)
from qrplatba.core.encoder import encode
from qrplatba.core.iban import FormatError
from qrplatba.core.validators import validate
from qrplatba.utils.qr_image import render_qr_data_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["qr-platba"])


def validation_error_response(report: ValidationErrorReport) -> JSONResponse:
    """Build the 400 response carrying a per-field validation report."""
    body = ErrorResponse(
        error="Validation failed",
        details={field: error.model_dump(mode="json") for field, error in report.items()},
    )
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


@router.post(
    "/qr-platba",
    response_model=QRPlatbaResponse,
    responses={400: {"model": ErrorResponse}},
)
async def generate_qr_platba(
    request: PaymentRequest,
    include_image: bool = Query(True, description="Whether to render the QR code as a PNG data URL"),
):
    """
    Generate a QR Platba code for the given payment.

    Args:
        request: Payment details
        include_image: Whether to render the QR code as a PNG data URL

    Returns:
        QRPlatbaResponse: SPD string and QR code image, or a 400 error with per-field details
    """
    report = validate(request)
    if report:
        return validation_error_response(report)

    try:
        qr_string = encode(request)
    except FormatError as e:
        # Account numbers with 11-12 digits pass validation but have no IBAN form
        logger.info(f"Account number could not be converted to IBAN: {str(e)}")
        return validation_error_response({
            "acc": FieldError(
                message="Account number cannot be converted to IBAN",
                error_kind=ErrorKind.FORMAT,
            )
        })

    qr_code = None
    if include_image:
        try:
            qr_code = render_qr_data_url(qr_string)
        except Exception as e:
            logger.error(f"Error rendering QR code: {str(e)}")
            raise HTTPException(
                status_code=500,
                detail=f"Error during QR code rendering: {str(e)}"
            )

    return QRPlatbaResponse(qr_string=qr_string, qr_code=qr_code)


@router.get("/health", response_model=Dict[str, Any])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Returns:
        Dict[str, Any]: Health status
    """
    return {"status": "ok", "service": "qr-platba"}
