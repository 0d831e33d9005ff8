"""
Request models for QR Platba API.
"""
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentRequest(BaseModel):
    """
    Payment details to be encoded into an SPD descriptor.

    Fields accept raw values of any type so that the request validator sees
    every field and reports all problems at once, including missing values.

    Attributes:
        acc: Account number in format "prefix-number/bankCode" or "number/bankCode"
        rec: Recipient name (max 250 characters)
        am: Amount in the given currency
        cc: Currency code (e.g., CZK)
        vs: Variable symbol (max 10 digits)
        ss: Specific symbol (max 10 digits)
        ks: Constant symbol (max 4 digits)
        dt: Due date in format YYYYMMDD
        msg: Message for the recipient (max 250 characters)
    """
    model_config = ConfigDict(frozen=True)

    acc: Any = Field(None, description="Account number (e.g., 19-2000145399/0800)")
    rec: Any = Field(None, description="Recipient name (max 250 characters)")
    am: Any = Field(None, description="Amount (e.g., 100.50)")
    cc: Any = Field(None, description="Currency code (e.g., CZK)")
    vs: Any = Field(None, description="Variable symbol (e.g., 1234567890)")
    ss: Any = Field(None, description="Specific symbol (e.g., 0987654321)")
    ks: Any = Field(None, description="Constant symbol (e.g., 0308)")
    dt: Any = Field(None, description="Due date (e.g., 20250806)")
    msg: Any = Field(None, description="Message for the recipient (max 250 characters)")

    @field_validator("am", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Any:
        """Turn numeric strings into floats, leaving anything else for the validator."""
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return value
        return value

    @field_validator("vs", "ss", "ks", "dt", mode="before")
    @classmethod
    def digits_as_string(cls, value: Any) -> Any:
        """Accept digit fields sent as JSON numbers."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
