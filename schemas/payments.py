from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class PaymentIntentRequest(BaseModel):
    price: Optional[float] = None

class PaymentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: float
    transaction_id: Optional[str] = Field(None, alias="transactionId")
