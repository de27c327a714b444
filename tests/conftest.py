"""Shared fixtures: in-memory database, seeded directory, recording webhook dispatcher."""

from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.database import Base
from app.models import (
    Appointment,
    AppointmentStatus,
    Employee,
    Establishment,
    OfferedService,
    User,
    Webhook,
)


class FakeWebhookService:
    """Records dispatch calls instead of delivering them"""

    def __init__(self):
        self.calls = []

    def trigger_webhooks(self, webhooks, payload):
        self.calls.append((list(webhooks), dict(payload)))
        return len(webhooks)


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def dispatcher():
    return FakeWebhookService()


@pytest.fixture
def seed(db):
    """Owner with one establishment, one employee, one 5000-cent service and a client"""
    owner = User(name="Olivia Owner", email="owner@salon.test")
    client = User(name="Carla Client", email="carla@example.test")
    db.add_all([owner, client])
    db.flush()

    establishment = Establishment(name="Downtown Salon", owner_id=owner.id)
    db.add(establishment)
    db.flush()

    employee = Employee(name="Eddie Stylist", establishment_id=establishment.id)
    haircut = OfferedService(
        name="Haircut", price_cents=5000, duration_minutes=60, establishment_id=establishment.id
    )
    db.add_all([employee, haircut])
    db.commit()

    return SimpleNamespace(
        owner=owner,
        client=client,
        establishment=establishment,
        employee=employee,
        service=haircut,
    )


@pytest.fixture
def make_appointment(db, seed):
    def _make(start, end, status=AppointmentStatus.PENDING, client=None, employee=None, service="default"):
        appointment = Appointment(
            client_id=(client or seed.client).id,
            service_id=seed.service.id if service == "default" else service,
            establishment_id=seed.establishment.id,
            employee_id=(employee or seed.employee).id,
            start_time=start,
            end_time=end,
            status=status,
        )
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        return appointment

    return _make


@pytest.fixture
def make_webhook(db):
    def _make(user, event_type, target_url="https://hooks.example.test/in", is_active=True):
        webhook = Webhook(
            user_id=user.id, event_type=event_type, target_url=target_url, is_active=is_active
        )
        db.add(webhook)
        db.commit()
        db.refresh(webhook)
        return webhook

    return _make

