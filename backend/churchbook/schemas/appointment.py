"""Pydantic schemas for Appointments."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class AppointmentCreate(BaseModel):
    schedule_id: str
    pastor_id: str
    notes: Optional[str] = None


class AppointmentOut(BaseModel):
    id: str
    schedule_id: Optional[str] = None
    member_id: Optional[str] = None
    pastor_id: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AppointmentDetailOut(AppointmentOut):
    """Appointment denormalized with member, pastor and schedule display fields."""

    member_name: Optional[str] = None
    pastor_name: Optional[str] = None
    schedule_title: Optional[str] = None
    location: Optional[str] = None
    schedule_info: Optional[str] = None
