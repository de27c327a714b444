import enum
import uuid

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate a UUID string primary key"""
    return str(uuid.uuid4())


class AppointmentStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class TransactionStatus(str, enum.Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    REFUNDED = "REFUNDED"


# Webhook event types
EVENT_APPOINTMENT_CREATED = "APPOINTMENT_CREATED"
EVENT_STATUS_UPDATED = "STATUS_UPDATED"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    establishments = relationship("Establishment", back_populates="owner")
    appointments = relationship("Appointment", back_populates="client")
    webhooks = relationship("Webhook", back_populates="user")


class Establishment(Base):
    __tablename__ = "establishments"

    id = Column(String(36), primary_key=True, default=generate_id)
    owner_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    owner = relationship("User", back_populates="establishments")
    employees = relationship("Employee", back_populates="establishment")
    services = relationship("OfferedService", back_populates="establishment")


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=generate_id)
    establishment_id = Column(String(36), ForeignKey("establishments.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    role = Column(String(100), nullable=True)  # e.g., "Hairdresser", "Dentist"

    establishment = relationship("Establishment", back_populates="employees")


class OfferedService(Base):
    __tablename__ = "offered_services"

    id = Column(String(36), primary_key=True, default=generate_id)
    establishment_id = Column(String(36), ForeignKey("establishments.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price_cents = Column(Integer, nullable=False)
    duration_minutes = Column(Integer, nullable=True)

    establishment = relationship("Establishment", back_populates="services")


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=generate_id)
    client_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    # Nullable: appointments without a priced service never produce a transaction
    service_id = Column(String(36), ForeignKey("offered_services.id"), nullable=True)
    establishment_id = Column(String(36), ForeignKey("establishments.id"), nullable=False, index=True)
    employee_id = Column(String(36), ForeignKey("employees.id"), nullable=False, index=True)
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=False)
    status = Column(Enum(AppointmentStatus), default=AppointmentStatus.PENDING, nullable=False)
    client_notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    client = relationship("User", back_populates="appointments")
    service = relationship("OfferedService")
    establishment = relationship("Establishment")
    employee = relationship("Employee")


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=generate_id)
    appointment_id = Column(String(36), ForeignKey("appointments.id"), nullable=True, index=True)
    establishment_id = Column(String(36), ForeignKey("establishments.id"), nullable=False, index=True)
    description = Column(String(500), nullable=True)
    amount_cents = Column(Integer, nullable=False)
    transaction_date = Column(Date, nullable=False)
    status = Column(Enum(TransactionStatus), default=TransactionStatus.PENDING, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Webhook(Base):
    __tablename__ = "webhooks"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    establishment_id = Column(String(36), ForeignKey("establishments.id"), nullable=True)
    event_type = Column(String(100), nullable=False, index=True)  # APPOINTMENT_CREATED, STATUS_UPDATED
    target_url = Column(String(1000), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="webhooks")
