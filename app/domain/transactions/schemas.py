"""Transaction domain schemas"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from ...models import TransactionStatus


class TransactionResponse(BaseModel):
    """Schema for transaction response"""

    id: str
    appointmentId: Optional[str] = None
    establishmentId: str
    description: Optional[str] = None
    amountCents: int
    transactionDate: date
    status: TransactionStatus
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
