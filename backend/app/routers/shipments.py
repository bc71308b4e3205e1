from fastapi import APIRouter, HTTPException, Query

from ..shipment_detector import detect_shipment_company, get_all_companies, is_valid_tracking_number
from ..validation import TrackingNumber

router = APIRouter(prefix="/shipments", tags=["shipments"])


@router.get("/carriers")
def list_carriers():
    return {"carriers": [c.as_dict() for c in get_all_companies()]}


@router.get("/detect")
def detect_carrier(tracking_number: TrackingNumber = Query(...)):
    tn = tracking_number.strip()
    if not is_valid_tracking_number(tn):
        raise HTTPException(status_code=400, detail="invalid tracking number")
    return {"tracking_number": tn, "carrier": detect_shipment_company(tn).as_dict()}
