"""Tests for the availability check and lookup repositories."""

from datetime import date, datetime

import pytest

from app.domain.appointments.repository import AppointmentRepository
from app.domain.directory.repository import EstablishmentRepository
from app.domain.transactions.repository import TransactionRepository
from app.domain.webhooks.repository import WebhookRepository
from app.models import (
    EVENT_APPOINTMENT_CREATED,
    EVENT_STATUS_UPDATED,
    AppointmentStatus,
    Transaction,
    TransactionStatus,
)


def at(hour, minute=0):
    return datetime(2026, 10, 20, hour, minute)


class TestEmployeeAvailability:
    @pytest.mark.parametrize(
        "start,end,busy",
        [
            (at(9), at(10), False),  # ends exactly when the booking starts
            (at(11), at(12), False),  # starts exactly when the booking ends
            (at(9), at(10, 1), True),
            (at(10, 59), at(12), True),
            (at(10, 15), at(10, 45), True),  # contained
            (at(9), at(12), True),  # containing
        ],
    )
    def test_overlap(self, db, seed, make_appointment, start, end, busy):
        make_appointment(at(10), at(11))

        assert AppointmentRepository.is_employee_unavailable(db, seed.employee.id, start, end) is busy

    def test_cancelled_appointments_still_block(self, db, seed, make_appointment):
        make_appointment(at(10), at(11), status=AppointmentStatus.CANCELLED)

        assert AppointmentRepository.is_employee_unavailable(db, seed.employee.id, at(10), at(11))


class TestLookups:
    def test_establishment_by_owner(self, db, seed):
        assert EstablishmentRepository.get_by_owner_id(db, seed.owner.id).id == seed.establishment.id
        assert EstablishmentRepository.get_by_owner_id(db, seed.client.id) is None

    def test_webhooks_by_event_and_user(self, db, seed, make_webhook):
        created = make_webhook(seed.owner, EVENT_APPOINTMENT_CREATED)
        status = make_webhook(seed.client, EVENT_STATUS_UPDATED)

        assert [w.id for w in WebhookRepository.find_by_event_type(db, EVENT_APPOINTMENT_CREATED)] == [created.id]
        assert [w.id for w in WebhookRepository.find_by_user(db, seed.client)] == [status.id]

    def test_transactions_by_establishment_date_bounds(self, db, seed):
        for day in (1, 15, 28):
            TransactionRepository.save(
                db,
                Transaction(
                    establishment_id=seed.establishment.id,
                    description="Haircut",
                    amount_cents=5000,
                    transaction_date=date(2026, 10, day),
                    status=TransactionStatus.PAID,
                ),
            )

        result = TransactionRepository.get_by_establishment(
            db, seed.establishment.id, date(2026, 10, 10), date(2026, 10, 28)
        )

        assert [t.transaction_date.day for t in result] == [28, 15]
