import pytest

from backend.app.shipment_detector import (
    SHIPMENT_COMPANIES,
    detect_shipment_company,
    get_all_companies,
    is_valid_tracking_number,
)


@pytest.mark.parametrize(
    "tracking_number,carrier",
    [
        ("#1234567", "messenger"),
        ("ord-1042", "messenger"),
        ("AJEX123456789", "ajex"),
        ("1Z999AA10123456784", "ups"),
        ("RR123456789SA", "spl"),
        ("9212345678901", "spl"),
        ("NOON12345678", "noon"),
        ("ZE12345678", "zajil"),
        ("NQ12345678", "naqel"),
        ("291536303713", "smsa"),
        ("431234567890", "smsa"),
        ("SMSA0001", "smsa"),
        ("123456789012", "fedex"),
        ("123456789012345", "fedex"),
        ("50589568724", "aramex"),
        ("12345678901234", "aramex"),
        ("5871268233", "dhl"),
        ("XYZ-000", "unknown"),
    ],
)
def test_detect_shipment_company(tracking_number, carrier):
    assert detect_shipment_company(tracking_number).id == carrier


def test_detection_ignores_case_and_surrounding_spaces():
    assert detect_shipment_company("  1z999aa10123456784 ").id == "ups"


def test_is_valid_tracking_number():
    assert is_valid_tracking_number("ABCD1234") is True
    assert is_valid_tracking_number("  1234567  ") is False
    assert is_valid_tracking_number("--------") is False
    assert is_valid_tracking_number("") is False


def test_get_all_companies_excludes_unknown():
    ids = [c.id for c in get_all_companies()]
    assert "unknown" not in ids
    assert len(ids) == len(SHIPMENT_COMPANIES) - 1
    assert SHIPMENT_COMPANIES["smsa"].as_dict()["name_en"] == "SMSA"
