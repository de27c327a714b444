"""Transaction repository - Database operations for financial records"""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Transaction


class TransactionRepository:
    """Repository for transaction database operations"""

    @staticmethod
    def save(db: Session, transaction: Transaction) -> Transaction:
        db.add(transaction)
        db.commit()
        db.refresh(transaction)
        return transaction

    @staticmethod
    def get_by_appointment(db: Session, appointment_id: str) -> list[Transaction]:
        return (
            db.query(Transaction)
            .filter(Transaction.appointment_id == appointment_id)
            .order_by(Transaction.created_at.asc())
            .all()
        )

    @staticmethod
    def get_by_establishment(
        db: Session,
        establishment_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """Get transactions for an establishment with optional date bounds (inclusive)"""
        query = db.query(Transaction).filter(Transaction.establishment_id == establishment_id)

        if start_date:
            query = query.filter(Transaction.transaction_date >= start_date)

        if end_date:
            query = query.filter(Transaction.transaction_date <= end_date)

        return query.order_by(Transaction.transaction_date.desc(), Transaction.created_at.desc()).all()
