"""
CLI tool for generating QR Platba payment codes.
"""
import json
import argparse
import logging
import sys
from typing import Dict, Any, Optional

from qrplatba.models.request import PaymentRequest
from qrplatba.models.response import ErrorResponse, QRPlatbaResponse
from qrplatba.core.encoder import encode
from qrplatba.core.iban import FormatError
from qrplatba.core.validators import validate
from qrplatba.utils.qr_image import render_qr_png

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def normalize_date(value: Optional[str]) -> Optional[str]:
    """Turn a YYYY-MM-DD date into YYYYMMDD, leaving other values untouched."""
    if not value:
        return value
    return value.replace("-", "")


def run_generator(request: PaymentRequest, output: Optional[str] = None) -> Dict[str, Any]:
    """
    Validate and encode the payment, optionally saving the QR code image.

    Args:
        request: Payment details
        output: PNG file path for the QR code image (optional)

    Returns:
        Dict[str, Any]: Generated SPD string or error information
    """
    report = validate(request)
    if report:
        return ErrorResponse(
            error="Validation failed",
            details={field: error.model_dump(mode="json") for field, error in report.items()},
        ).model_dump(mode="json")

    try:
        qr_string = encode(request)
    except FormatError as e:
        logger.error(f"Error converting account number: {str(e)}")
        return ErrorResponse(error=str(e)).model_dump(mode="json")

    if output:
        render_qr_png(qr_string, output)
        logger.info(f"QR code saved to {output}")

    return QRPlatbaResponse(qr_string=qr_string).model_dump(mode="json", exclude_none=True)


def main(argv=None):
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="QR Platba Generator CLI")
    parser.add_argument("--acc", required=True, help="Account number (e.g., 19-2000145399/0800)")
    parser.add_argument("--am", required=True, type=float, help="Amount (e.g., 100.50)")
    parser.add_argument("--cc", default="CZK", help="Currency code (default: CZK)")
    parser.add_argument("--vs", help="Variable symbol")
    parser.add_argument("--ss", help="Specific symbol")
    parser.add_argument("--ks", help="Constant symbol")
    parser.add_argument("--dt", help="Due date (YYYYMMDD or YYYY-MM-DD)")
    parser.add_argument("--msg", help="Message for the recipient")
    parser.add_argument("--rec", help="Recipient name")
    parser.add_argument("--output", help="Output PNG file path for the QR code (optional)")

    args = parser.parse_args(argv)

    request = PaymentRequest(
        acc=args.acc,
        am=args.am,
        cc=args.cc,
        vs=args.vs,
        ss=args.ss,
        ks=args.ks,
        dt=normalize_date(args.dt),
        msg=args.msg,
        rec=args.rec,
    )

    logger.info(f"Generating QR Platba for account: {args.acc}")

    result = run_generator(request, output=args.output)

    # Pretty print result
    print(json.dumps(result, indent=2, ensure_ascii=False))

    return 0 if result["success"] else 1


if __name__ == "__main__":
    sys.exit(main())
