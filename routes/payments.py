import logging
from fastapi import APIRouter, HTTPException, Depends
from pymongo.database import Database
from database import get_db
from database_schemas import PAYMENTS_COLLECTION, USERS_COLLECTION, TIER_GOLD
from schemas.payments import PaymentIntentRequest, PaymentCreate
from auth import verify_session
from payment_provider import create_payment_intent, PaymentProviderError
from utils.route_helpers import insert_result, update_result, now_ms

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])

@router.post("/create-payment-intent")
def payment_intent(req: PaymentIntentRequest, claims: dict = Depends(verify_session)):
    if not req.price or req.price <= 0:
        return {"message": "price is required"}
    amount = round(req.price * 100)
    try:
        client_secret = create_payment_intent(amount)
    except PaymentProviderError:
        raise HTTPException(status_code=502, detail="Payment provider unavailable")
    return {"clientSecret": client_secret}

@router.post("/payments")
def record_payment(payment: PaymentCreate, db: Database = Depends(get_db), claims: dict = Depends(verify_session)):
    """Record a completed payment and upgrade the signed-in payer to the Gold tier."""
    payer = claims["email"]
    doc = payment.model_dump(by_alias=True, exclude_none=True)
    doc.update({"email": payer, "timestamp": now_ms()})
    payment_result = db[PAYMENTS_COLLECTION].insert_one(doc)
    user_result = db[USERS_COLLECTION].update_one(
        {"email": payer},
        {"$set": {"subscription": TIER_GOLD}},
    )
    logger.info("Payment %s recorded for %s", payment_result.inserted_id, payer)
    return {"paymentResult": insert_result(payment_result), "updateResult": update_result(user_result)}
