"""
SPD (Short Payment Descriptor) serialization for QR Platba.

See https://qr-platba.cz/pro-vyvojare/specifikace-formatu/
"""
import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import List, Union

from qrplatba.config import settings
from qrplatba.core.iban import account_number_to_iban
from qrplatba.models.request import PaymentRequest

logger = logging.getLogger(__name__)

SEPARATOR = "*"
ESCAPED_SEPARATOR = "%2A"

# Optional keys in output order, paired with the request attribute they come from
OPTIONAL_FIELDS = (
    ("VS", "vs"),
    ("SS", "ss"),
    ("KS", "ks"),
    ("DT", "dt"),
    ("MSG", "msg"),
    ("RN", "rec"),
)


def format_amount(amount: Union[int, float, Decimal]) -> str:
    """
    Format an amount with exactly two decimal places.

    Args:
        amount: Amount to format

    Returns:
        str: Amount rounded half up (e.g., 100.50)
    """
    value = Decimal(str(amount))
    with localcontext() as ctx:
        # Integer digits plus two decimals must fit into the context precision
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{value:f}"


def escape_value(value: str) -> str:
    """Escape the segment separator inside a field value."""
    return value.replace(SEPARATOR, ESCAPED_SEPARATOR)


def encode(request: PaymentRequest) -> str:
    """
    Generate the SPD string for a payment request.

    The request must already have passed ``validate``; it is not checked again.

    Args:
        request: Validated payment request data

    Returns:
        str: SPD descriptor (e.g., SPD*1.0*ACC:CZ7508000000000123456789*AM:100.50*CC:CZK)

    Raises:
        FormatError: If the account number cannot be converted to IBAN
    """
    segments: List[str] = [
        "SPD",
        settings.spd_version,
        f"ACC:{account_number_to_iban(request.acc)}",
        f"AM:{format_amount(request.am)}",
        f"CC:{request.cc}",
    ]

    for key, attribute in OPTIONAL_FIELDS:
        value = getattr(request, attribute)
        if value:
            segments.append(f"{key}:{escape_value(str(value))}")

    qr_string = SEPARATOR.join(segments)
    logger.debug(f"Encoded SPD string: {qr_string}")
    return qr_string
