"""Appointment service - Business logic for the appointment lifecycle"""

import logging
from datetime import date, datetime

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import (
    EVENT_APPOINTMENT_CREATED,
    EVENT_STATUS_UPDATED,
    Appointment,
    AppointmentStatus,
    Transaction,
    TransactionStatus,
    User,
)
from ..directory.repository import (
    EmployeeRepository,
    EstablishmentRepository,
    OfferedServiceRepository,
    UserRepository,
)
from ..transactions.repository import TransactionRepository
from ..webhooks.repository import WebhookRepository
from ..webhooks.service import WebhookService
from .repository import AppointmentRepository
from .schemas import AppointmentRequest, parse_appointment_status, to_naive_utc

logger = logging.getLogger(__name__)


class AppointmentService:
    """Service layer for appointment business logic"""

    def __init__(self, db: Session, webhook_service: WebhookService):
        self.db = db
        self.webhook_service = webhook_service
        self.repo = AppointmentRepository()
        self.users = UserRepository()
        self.establishments = EstablishmentRepository()
        self.employees = EmployeeRepository()
        self.services = OfferedServiceRepository()
        self.transactions = TransactionRepository()
        self.webhooks = WebhookRepository()

    def get_appointments_by_user_and_date_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[Appointment]:
        """Get a client's appointments intersecting [start, end)"""
        return self.repo.find_by_client_and_date_range(
            self.db, user_id, to_naive_utc(start), to_naive_utc(end)
        )

    def get_appointments_by_establishment_and_date_range(
        self, owner_id: str, start: datetime, end: datetime
    ) -> list[Appointment]:
        """Get the appointments of the establishment owned by owner_id intersecting [start, end)"""
        establishment = self.establishments.get_by_owner_id(self.db, owner_id)
        if not establishment:
            raise HTTPException(
                status_code=404, detail=f"Establishment not found for owner: {owner_id}"
            )

        return self.repo.find_by_establishment_and_date_range(
            self.db, establishment.id, to_naive_utc(start), to_naive_utc(end)
        )

    def create_appointment(self, data: AppointmentRequest, logged_user: User) -> Appointment:
        """
        Book an appointment after checking the employee is free.

        The availability check and the insert are not atomic: two concurrent
        bookings for the same slot can both pass the check.
        """
        client = self.users.get_by_id(self.db, logged_user.id)
        if not client:
            raise HTTPException(status_code=404, detail="User not found")

        service = self.services.get_by_id(self.db, data.serviceId)
        if not service:
            raise HTTPException(status_code=404, detail="Service not found")

        establishment = self.establishments.get_by_id(self.db, data.establishmentId)
        if not establishment:
            raise HTTPException(status_code=404, detail="Establishment not found")

        employee = self.employees.get_by_id(self.db, data.employeeId)
        if not employee:
            raise HTTPException(status_code=404, detail="Employee not found")

        if self.repo.is_employee_unavailable(self.db, employee.id, data.startTime, data.endTime):
            logger.warning(
                f"⚠️ Booking conflict for employee {employee.id}: "
                f"{data.startTime.isoformat()} - {data.endTime.isoformat()}"
            )
            raise HTTPException(
                status_code=409, detail="Employee already has an appointment at this time"
            )

        appointment = Appointment(
            client=client,
            service=service,
            establishment=establishment,
            employee=employee,
            start_time=data.startTime,
            end_time=data.endTime,
            status=data.status if data.status is not None else AppointmentStatus.PENDING,
            client_notes=data.clientNotes,
        )
        saved = self.repo.save(self.db, appointment)
        logger.info(
            f"📅 Appointment {saved.id} booked: client={client.id}, employee={employee.id}, "
            f"status={saved.status.value}"
        )

        admin_webhooks = self.webhooks.find_by_event_type(self.db, EVENT_APPOINTMENT_CREATED)
        self.webhook_service.trigger_webhooks(
            admin_webhooks,
            {
                "event": EVENT_APPOINTMENT_CREATED,
                "appointmentId": saved.id,
                "clientName": saved.client.name,
                "startTime": saved.start_time,
            },
        )

        return saved

    def update_status(self, appointment_id: str, status: str) -> Appointment:
        """
        Set any valid status, then record revenue on completion and notify the client.

        No transition graph is enforced. Completing an appointment twice records
        a second transaction.
        """
        appointment = self.repo.get_by_id(self.db, appointment_id)
        if not appointment:
            raise HTTPException(status_code=404, detail="Appointment not found")

        try:
            new_status = parse_appointment_status(status)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        previous_status = appointment.status
        appointment.status = new_status
        saved = self.repo.save(self.db, appointment)
        logger.info(
            f"✅ Appointment {saved.id} transitioned: "
            f"{previous_status.value} → {new_status.value}"
        )

        if new_status == AppointmentStatus.COMPLETED and saved.service is not None:
            self._record_transaction(saved)

        customer_webhooks = [
            w
            for w in self.webhooks.find_by_user(self.db, saved.client)
            if w.event_type == EVENT_STATUS_UPDATED
        ]
        self.webhook_service.trigger_webhooks(
            customer_webhooks,
            {
                "event": EVENT_STATUS_UPDATED,
                "appointmentId": saved.id,
                "newStatus": saved.status.value,
            },
        )

        return saved

    def _record_transaction(self, appointment: Appointment) -> Transaction:
        """Create the PAID transaction for a completed appointment"""
        existing = self.transactions.get_by_appointment(self.db, appointment.id)
        if existing:
            # TODO: decide whether repeated completion should be idempotent
            logger.warning(
                f"⚠️ Appointment {appointment.id} already has {len(existing)} transaction(s); "
                "recording another"
            )

        transaction = Transaction(
            appointment_id=appointment.id,
            establishment_id=appointment.establishment_id,
            description=appointment.service.name,
            amount_cents=appointment.service.price_cents,
            transaction_date=date.today(),
            status=TransactionStatus.PAID,
        )
        saved = self.transactions.save(self.db, transaction)
        logger.info(
            f"💰 Transaction {saved.id} recorded for appointment {appointment.id}: "
            f"{saved.amount_cents} cents"
        )
        return saved
