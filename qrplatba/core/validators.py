"""
Validation of QR Platba payment fields.

The field predicates never raise; they return False for anything they do
not recognise, including values of the wrong type. ``validate`` runs every
check and reports all failing fields at once.
"""
import logging
import math
import re
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Optional

from qrplatba.config import settings
from qrplatba.models.request import PaymentRequest
from qrplatba.models.response import ErrorKind, FieldError, ValidationErrorReport

logger = logging.getLogger(__name__)

ACCOUNT_NUMBER_PATTERN = re.compile(r"(\d{1,6}-)?\d{1,12}/\d{4}", re.ASCII)
DATE_PATTERN = re.compile(r"\d{8}", re.ASCII)

SYMBOL_MAX_LENGTH = 10
CONSTANT_SYMBOL_MAX_LENGTH = 4
TEXT_MAX_LENGTH = 250


def is_valid_account_number(acc: Any) -> bool:
    """
    Validate if the account number is in the correct format.

    Args:
        acc: Account number (e.g., 000000-000000000000/0000)

    Returns:
        bool: True if the account number is valid
    """
    return isinstance(acc, str) and ACCOUNT_NUMBER_PATTERN.fullmatch(acc) is not None


def is_valid_digit_string(value: Any, max_length: int) -> bool:
    """
    Validate if a string contains only digits and is within the maximum length.

    Args:
        value: String to validate, an empty or missing value is accepted
        max_length: Maximum allowed length

    Returns:
        bool: True if the string is valid
    """
    if value is None or value == "":
        return True
    if not isinstance(value, str):
        return False
    return re.fullmatch(rf"\d{{1,{max_length}}}", value, re.ASCII) is not None


def is_valid_date(value: Any) -> bool:
    """
    Validate if a date string is in YYYYMMDD format and represents a real date.

    Args:
        value: Date string, an empty or missing value is accepted

    Returns:
        bool: True if the date is valid
    """
    if value is None or value == "":
        return True
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return False

    try:
        date(int(value[0:4]), int(value[4:6]), int(value[6:8]))
    except ValueError:
        return False
    return True


def is_valid_amount(amount: Any) -> bool:
    """Validate if an amount is a finite positive number."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        return False
    if isinstance(amount, Decimal):
        return amount.is_finite() and amount > 0
    return math.isfinite(amount) and amount > 0


def is_valid_currency(currency: Any, currencies: Optional[Iterable[str]] = None) -> bool:
    """
    Validate if a currency code is supported.

    Args:
        currency: Currency code (e.g., CZK)
        currencies: Accepted codes, defaults to the configured supported currencies

    Returns:
        bool: True if the currency is supported
    """
    if currencies is None:
        currencies = settings.supported_currencies
    return isinstance(currency, str) and currency in currencies


def is_valid_string_length(value: Any, max_length: int) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and len(value) <= max_length


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def validate(request: PaymentRequest) -> Optional[ValidationErrorReport]:
    """
    Validate the payment request data.

    Every field is checked, so a single call reports all problems.

    Args:
        request: Payment request data

    Returns:
        Optional[ValidationErrorReport]: Errors keyed by field name, or None if the request is valid
    """
    errors: ValidationErrorReport = {}

    def fail(field: str, message: str, kind: ErrorKind = ErrorKind.FORMAT) -> None:
        logger.debug(f"Field {field} failed validation ({kind.value}): {message}")
        errors[field] = FieldError(message=message, error_kind=kind)

    # Mandatory fields
    if _is_missing(request.acc):
        fail("acc", "Account number is required", ErrorKind.REQUIRED)
    elif not is_valid_account_number(request.acc):
        fail("acc", "Invalid account number format. Expected format: 000000-000000000000/0000")

    if _is_missing(request.am):
        fail("am", "Amount is required", ErrorKind.REQUIRED)
    elif not is_valid_amount(request.am):
        fail("am", "Invalid amount. Must be a positive number")

    if _is_missing(request.cc):
        fail("cc", "Currency is required", ErrorKind.REQUIRED)
    elif not is_valid_currency(request.cc):
        fail("cc", f"Invalid currency code. Supported: {', '.join(settings.supported_currencies)}")

    # Optional fields
    if not is_valid_string_length(request.rec, TEXT_MAX_LENGTH):
        fail("rec", f"Invalid recipient name. Must be text, max {TEXT_MAX_LENGTH} characters")

    if not is_valid_digit_string(request.vs, SYMBOL_MAX_LENGTH):
        fail("vs", f"Invalid variable symbol. Must be a string of digits, max {SYMBOL_MAX_LENGTH} characters")

    if not is_valid_digit_string(request.ss, SYMBOL_MAX_LENGTH):
        fail("ss", f"Invalid specific symbol. Must be a string of digits, max {SYMBOL_MAX_LENGTH} characters")

    if not is_valid_digit_string(request.ks, CONSTANT_SYMBOL_MAX_LENGTH):
        fail("ks", f"Invalid constant symbol. Must be a string of digits, max {CONSTANT_SYMBOL_MAX_LENGTH} characters")

    if not is_valid_date(request.dt):
        fail("dt", "Invalid date format. Expected format: YYYYMMDD")

    if not is_valid_string_length(request.msg, TEXT_MAX_LENGTH):
        fail("msg", f"Invalid message. Must be text, max {TEXT_MAX_LENGTH} characters")

    if errors:
        logger.info(f"Payment request failed validation for fields: {', '.join(errors)}")
        return errors

    return None
