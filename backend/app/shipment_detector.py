from __future__ import annotations

import re
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ShipmentCompany:
    id: str
    name_ar: str
    name_en: str
    color: str

    def as_dict(self) -> dict:
        return asdict(self)


SHIPMENT_COMPANIES: dict[str, ShipmentCompany] = {
    c.id: c
    for c in (
        ShipmentCompany("messenger", "مندوب توصيل", "Messenger Courier", "#9333ea"),
        ShipmentCompany("aramex", "ارامكس", "Aramex", "#e31837"),
        ShipmentCompany("smsa", "سمسا", "SMSA", "#0066cc"),
        ShipmentCompany("dhl", "دي اتش ال", "DHL", "#ffcc00"),
        ShipmentCompany("fedex", "فيديكس", "FedEx", "#4d148c"),
        ShipmentCompany("ups", "يو بي اس", "UPS", "#351c15"),
        ShipmentCompany("noon", "نون", "Noon", "#feee00"),
        ShipmentCompany("zajil", "زاجل", "Zajil", "#00a651"),
        ShipmentCompany("spl", "الشركة السعودية للبريد", "Saudi Post (SPL)", "#006341"),
        ShipmentCompany("naqel", "ناقل", "Naqel", "#ff6b35"),
        ShipmentCompany("ajex", "ايجكس", "Ajex", "#ff6600"),
        ShipmentCompany("unknown", "غير معروف", "Unknown", "#6b7280"),
    )
}

_ORDER_NUMBER_RE = re.compile(r"^#?[0-9]{6,9}$")
_ORDER_NUMBER_WITH_PREFIX_RE = re.compile(r"^#?ORD[-_\s]?[0-9]{3,}$", re.IGNORECASE)
_AJEX_RE = re.compile(r"^AJ[A-Z0-9]+$")
_SPL_INTL_RE = re.compile(r"^(RP|RR|CP|EE|EA|LC|LX|RG|RA)[0-9]{9}SA$")
_SPL_LOCAL_RE = re.compile(r"^92[0-9]{11}$")
_SMSA_RE = re.compile(r"^(23|29|30)[0-9]{10}$")
_SMSA_LEGACY_RE = re.compile(r"^4[0-9]{11}$")
_DIGITS_12_RE = re.compile(r"^[0-9]{12}$")
_DIGITS_15_RE = re.compile(r"^[0-9]{15}$")
_ARAMEX_RE = re.compile(r"^5[0-9]{10}$")
_DIGITS_13_14_RE = re.compile(r"^[0-9]{13,14}$")
_DHL_RE = re.compile(r"^[159][0-9]{9}$")
_ALNUM_RE = re.compile(r"[a-zA-Z0-9]")


def _is_likely_order_number(tracking_number: str) -> bool:
    # Local messenger deliveries are tracked by the store order number itself.
    cleaned = (tracking_number or "").strip()
    if not cleaned:
        return False
    if _ORDER_NUMBER_WITH_PREFIX_RE.match(cleaned):
        return True
    return bool(_ORDER_NUMBER_RE.match(cleaned))


def detect_shipment_company(tracking_number: str) -> ShipmentCompany:
    """
    Guess the carrier from the tracking number format.
    Rules are ordered from most to least specific; the first match wins.
    """
    c = (tracking_number or "").strip().upper()

    if _is_likely_order_number(tracking_number):
        return SHIPMENT_COMPANIES["messenger"]
    if c.startswith("AJ") and _AJEX_RE.match(c):
        return SHIPMENT_COMPANIES["ajex"]
    if c.startswith("1Z") and len(c) == 18:
        return SHIPMENT_COMPANIES["ups"]
    if _SPL_INTL_RE.match(c) or _SPL_LOCAL_RE.match(c):
        return SHIPMENT_COMPANIES["spl"]
    if "NOON" in c or c.startswith("NO"):
        return SHIPMENT_COMPANIES["noon"]
    if c.startswith("ZE") or "ZAJIL" in c:
        return SHIPMENT_COMPANIES["zajil"]
    if "NAQ" in c or c.startswith("NQ"):
        return SHIPMENT_COMPANIES["naqel"]
    if c.startswith("SMSA") or _SMSA_RE.match(c) or _SMSA_LEGACY_RE.match(c):
        return SHIPMENT_COMPANIES["smsa"]
    if (_DIGITS_12_RE.match(c) and not c.startswith(("29", "30"))) or _DIGITS_15_RE.match(c):
        return SHIPMENT_COMPANIES["fedex"]
    if _ARAMEX_RE.match(c) or _DIGITS_13_14_RE.match(c):
        return SHIPMENT_COMPANIES["aramex"]
    if _DHL_RE.match(c):
        return SHIPMENT_COMPANIES["dhl"]
    return SHIPMENT_COMPANIES["unknown"]


def is_valid_tracking_number(tracking_number: str) -> bool:
    cleaned = (tracking_number or "").strip()
    return len(cleaned) >= 8 and bool(_ALNUM_RE.search(cleaned))


def get_all_companies() -> list[ShipmentCompany]:
    return [c for c in SHIPMENT_COMPANIES.values() if c.id != "unknown"]
