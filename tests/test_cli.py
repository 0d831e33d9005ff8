"""
Tests for the QR Platba CLI.
"""
import json

from qrplatba.cli import main, normalize_date


def test_normalize_date():
    assert normalize_date("2025-08-06") == "20250806"
    assert normalize_date("20250806") == "20250806"
    assert normalize_date(None) is None


def test_cli_success(capsys):
    """Test generation from command line arguments."""
    exit_code = main(["--acc", "123456789/0800", "--am", "100", "--dt", "2025-08-06", "--msg", "Faktura 1"])

    assert exit_code == 0
    result = json.loads(capsys.readouterr().out)
    assert result == {
        "success": True,
        "qr_string": "SPD*1.0*ACC:CZ7508000000000123456789*AM:100.00*CC:CZK*DT:20250806*MSG:Faktura 1",
    }


def test_cli_validation_error(capsys):
    exit_code = main(["--acc", "invalid", "--am", "-5", "--cc", "GBP"])

    assert exit_code == 1
    result = json.loads(capsys.readouterr().out)
    assert result["success"] is False
    assert set(result["details"]) == {"acc", "am", "cc"}


def test_cli_account_without_iban_form(capsys):
    exit_code = main(["--acc", "123456789012/0800", "--am", "100"])

    assert exit_code == 1
    assert json.loads(capsys.readouterr().out)["success"] is False


def test_cli_saves_png(tmp_path, capsys):
    """Test that the QR code image is written when --output is given."""
    output = tmp_path / "qr" / "platba.png"

    exit_code = main(["--acc", "19-2000145399/0800", "--am", "42.5", "--output", str(output)])

    assert exit_code == 0
    assert output.read_bytes().startswith(b"\x89PNG")
