"""
Configuration module for the QR Platba generator.
"""
import os
from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    """Application settings loaded from environment variables."""
    model_config = ConfigDict(validate_default=True)

    supported_currencies: List[str] = Field(
        default_factory=lambda: _split_list(os.getenv("SUPPORTED_CURRENCIES", "CZK,EUR,USD"))
    )
    spd_version: str = os.getenv("SPD_VERSION", "1.0")
    qr_error_correction: Literal["L", "M", "Q", "H"] = os.getenv("QR_ERROR_CORRECTION", "M").upper()
    qr_box_size: int = int(os.getenv("QR_BOX_SIZE", "10"))
    qr_border: int = int(os.getenv("QR_BORDER", "4"))
    cors_origins: List[str] = Field(
        default_factory=lambda: _split_list(os.getenv("CORS_ORIGINS", "*"))
    )
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

# Create and export settings instance
settings = Settings()
