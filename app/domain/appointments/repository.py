"""Appointment repository - Database operations for appointments"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Appointment


class AppointmentRepository:
    """Repository for appointment database operations"""

    @staticmethod
    def get_by_id(db: Session, appointment_id: str) -> Optional[Appointment]:
        """Get an appointment by ID"""
        return db.query(Appointment).filter(Appointment.id == appointment_id).first()

    @staticmethod
    def find_by_client_and_date_range(
        db: Session, client_id: str, start: datetime, end: datetime
    ) -> list[Appointment]:
        """Get a client's appointments whose window intersects [start, end)"""
        return (
            db.query(Appointment)
            .options(joinedload(Appointment.service), joinedload(Appointment.employee))
            .filter(
                Appointment.client_id == client_id,
                Appointment.start_time < end,
                Appointment.end_time > start,
            )
            .order_by(Appointment.start_time.asc())
            .all()
        )

    @staticmethod
    def find_by_establishment_and_date_range(
        db: Session, establishment_id: str, start: datetime, end: datetime
    ) -> list[Appointment]:
        """Get an establishment's appointments whose window intersects [start, end)"""
        return (
            db.query(Appointment)
            .options(
                joinedload(Appointment.client),
                joinedload(Appointment.service),
                joinedload(Appointment.employee),
            )
            .filter(
                Appointment.establishment_id == establishment_id,
                Appointment.start_time < end,
                Appointment.end_time > start,
            )
            .order_by(Appointment.start_time.asc())
            .all()
        )

    @staticmethod
    def is_employee_unavailable(
        db: Session, employee_id: str, start: datetime, end: datetime
    ) -> bool:
        """True when the employee already holds an appointment overlapping [start, end)"""
        conflict = (
            db.query(Appointment.id)
            .filter(
                Appointment.employee_id == employee_id,
                Appointment.start_time < end,
                Appointment.end_time > start,
            )
            .first()
        )
        return conflict is not None

    @staticmethod
    def save(db: Session, appointment: Appointment) -> Appointment:
        """Insert or update an appointment"""
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        return appointment
