"""Tests for status parsing and booking request validation."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.domain.appointments.schemas import AppointmentRequest, parse_appointment_status
from app.models import AppointmentStatus


class TestParseAppointmentStatus:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("COMPLETED", AppointmentStatus.COMPLETED),
            ("completed", AppointmentStatus.COMPLETED),
            ("Confirmed", AppointmentStatus.CONFIRMED),
            ("cancelled", AppointmentStatus.CANCELLED),
            ("pending", AppointmentStatus.PENDING),
        ],
    )
    def test_case_insensitive(self, raw, expected):
        assert parse_appointment_status(raw) == expected

    @pytest.mark.parametrize("raw", ["done", "", "COMPLETE", "paid", " completed "])
    def test_unknown_value_raises(self, raw):
        with pytest.raises(ValueError, match="Invalid status"):
            parse_appointment_status(raw)


class TestAppointmentRequest:
    def _fields(self, **overrides):
        fields = {
            "serviceId": "svc",
            "establishmentId": "est",
            "employeeId": "emp",
            "startTime": datetime(2026, 10, 20, 10, 0),
            "endTime": datetime(2026, 10, 20, 11, 0),
        }
        fields.update(overrides)
        return fields

    def test_status_is_optional(self):
        request = AppointmentRequest(**self._fields())
        assert request.status is None
        assert request.clientNotes is None

    def test_status_accepts_any_case(self):
        request = AppointmentRequest(**self._fields(status="confirmed"))
        assert request.status == AppointmentStatus.CONFIRMED

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            AppointmentRequest(**self._fields(status="booked"))

    def test_rejects_end_before_start(self):
        with pytest.raises(ValidationError):
            AppointmentRequest(**self._fields(endTime=datetime(2026, 10, 20, 9, 0)))

    def test_rejects_empty_interval(self):
        with pytest.raises(ValidationError):
            AppointmentRequest(**self._fields(endTime=datetime(2026, 10, 20, 10, 0)))

    def test_offset_aware_times_become_naive_utc(self):
        plus_two = timezone(timedelta(hours=2))
        request = AppointmentRequest(
            **self._fields(
                startTime="2026-10-20T10:00:00+02:00",
                endTime=datetime(2026, 10, 20, 11, 0, tzinfo=plus_two),
            )
        )

        assert request.startTime == datetime(2026, 10, 20, 8, 0)
        assert request.endTime == datetime(2026, 10, 20, 9, 0)
        assert request.startTime.tzinfo is None

    def test_utc_suffix_is_accepted(self):
        request = AppointmentRequest(
            **self._fields(startTime="2026-10-20T08:30:00Z", endTime="2026-10-20T09:30:00Z")
        )

        assert request.startTime == datetime(2026, 10, 20, 8, 30)

    def test_naive_times_are_kept(self):
        request = AppointmentRequest(**self._fields())

        assert request.startTime == datetime(2026, 10, 20, 10, 0)
