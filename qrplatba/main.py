"""
Main FastAPI application for the QR Platba generator.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from qrplatba.api.routes.qr_platba import router as qr_platba_router, validation_error_response
from qrplatba.config import settings
from qrplatba.models.request import PaymentRequest
from qrplatba.models.response import ErrorKind, FieldError, ValidationErrorReport

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.
    Handles startup and shutdown events.
    """
    logger.info("Starting up QR Platba API")
    logger.info(f"Supported currencies: {', '.join(settings.supported_currencies)}")

    yield

    # Shutdown
    logger.info("Shutting down QR Platba API")


# Create FastAPI application
app = FastAPI(
    title="QR Platba API",
    description="API for generating Czech QR payment codes (SPD format)",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report body errors in the same shape as field validation errors."""
    report: ValidationErrorReport = {}
    for error in exc.errors():
        source, *location = error.get("loc") or ("body",)
        if source == "query" and location:
            field = str(location[0])
        # Malformed JSON is located by character offset, not by field name
        elif location and location[0] in PaymentRequest.model_fields:
            field = location[0]
        else:
            field = "body"
        if field in report:
            continue
        kind = ErrorKind.REQUIRED if error.get("type") == "missing" else ErrorKind.FORMAT
        report[field] = FieldError(message=error.get("msg", "Invalid value"), error_kind=kind)
    logger.info(f"Rejected malformed request body for fields: {', '.join(report)}")
    return validation_error_response(report)


# Exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for all unhandled exceptions."""
    logger.error(f"Unhandled exception: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )


# Include routers
app.include_router(qr_platba_router)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "QR Platba API",
        "version": "1.0.0",
        "status": "running",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("qrplatba.main:app", host=settings.host, port=settings.port, reload=True)
