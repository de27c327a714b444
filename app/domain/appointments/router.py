"""Appointment router - FastAPI endpoints for appointment operations"""

import logging
from datetime import datetime

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from ..webhooks.service import WebhookService
from .schemas import AppointmentRequest, AppointmentResponse, AppointmentStatusUpdate
from .service import AppointmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def get_appointment_service(
    background_tasks: BackgroundTasks, db: Session = Depends(get_db)
) -> AppointmentService:
    """Dependency injection for AppointmentService"""
    return AppointmentService(db, WebhookService(background_tasks))


@router.get("/me", response_model=list[AppointmentResponse])
async def get_my_appointments(
    start: datetime = Query(...),
    end: datetime = Query(...),
    current_user: User = Depends(get_current_user),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Get the current client's appointments in a date range"""
    appointments = service.get_appointments_by_user_and_date_range(current_user.id, start, end)
    return [AppointmentResponse.from_appointment(a) for a in appointments]


@router.get("/establishment", response_model=list[AppointmentResponse])
async def get_establishment_appointments(
    start: datetime = Query(...),
    end: datetime = Query(...),
    current_user: User = Depends(get_current_user),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Get the schedule of the establishment owned by the current user"""
    appointments = service.get_appointments_by_establishment_and_date_range(
        current_user.id, start, end
    )
    return [AppointmentResponse.from_appointment(a) for a in appointments]


@router.post("", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    data: AppointmentRequest,
    current_user: User = Depends(get_current_user),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Book an appointment for the current user"""
    appointment = service.create_appointment(data, current_user)
    return AppointmentResponse.from_appointment(appointment)


@router.patch("/{appointment_id}/status", response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: str,
    data: AppointmentStatusUpdate,
    current_user: User = Depends(get_current_user),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Change an appointment's status"""
    logger.info(f"User {current_user.id} setting appointment {appointment_id} to {data.status}")
    appointment = service.update_status(appointment_id, data.status)
    return AppointmentResponse.from_appointment(appointment)
