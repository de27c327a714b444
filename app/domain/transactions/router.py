"""Transaction router - Financial records for establishment owners"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from ..directory.repository import EstablishmentRepository
from .repository import TransactionRepository
from .schemas import TransactionResponse

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("", response_model=list[TransactionResponse])
async def get_transactions(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get transactions of the establishment owned by the current user"""
    establishment = EstablishmentRepository.get_by_owner_id(db, current_user.id)
    if not establishment:
        raise HTTPException(
            status_code=404, detail=f"Establishment not found for owner: {current_user.id}"
        )

    transactions = TransactionRepository.get_by_establishment(
        db, establishment.id, start_date, end_date
    )
    return [
        TransactionResponse(
            id=t.id,
            appointmentId=t.appointment_id,
            establishmentId=t.establishment_id,
            description=t.description,
            amountCents=t.amount_cents,
            transactionDate=t.transaction_date,
            status=t.status,
            created_at=t.created_at,
        )
        for t in transactions
    ]
