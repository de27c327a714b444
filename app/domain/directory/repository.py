"""Directory repository - Lookups for users, establishments, employees and offered services"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Employee, Establishment, OfferedService, User


class UserRepository:
    """Repository for user lookups"""

    @staticmethod
    def get_by_id(db: Session, user_id: str) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()


class EstablishmentRepository:
    """Repository for establishment lookups"""

    @staticmethod
    def get_by_id(db: Session, establishment_id: str) -> Optional[Establishment]:
        return db.query(Establishment).filter(Establishment.id == establishment_id).first()

    @staticmethod
    def get_by_owner_id(db: Session, owner_id: str) -> Optional[Establishment]:
        """Get the establishment owned by an admin user"""
        return (
            db.query(Establishment)
            .filter(Establishment.owner_id == owner_id)
            .order_by(Establishment.created_at.asc())
            .first()
        )


class EmployeeRepository:
    """Repository for employee lookups"""

    @staticmethod
    def get_by_id(db: Session, employee_id: str) -> Optional[Employee]:
        return db.query(Employee).filter(Employee.id == employee_id).first()


class OfferedServiceRepository:
    """Repository for offered service lookups"""

    @staticmethod
    def get_by_id(db: Session, service_id: str) -> Optional[OfferedService]:
        return db.query(OfferedService).filter(OfferedService.id == service_id).first()
