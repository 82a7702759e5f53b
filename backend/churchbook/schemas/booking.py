"""Pydantic schemas for booking requests (`request_bookings`)."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class BookingRequestCreate(BaseModel):
    schedule_id: str
    member_name: str = ""
    member_email: str = ""
    member_contact: str = ""
    member_address: str = ""
    member_purok: str = ""
    church_name: str = ""
    number_of_members: Optional[int] = None


class BookingRequestOut(BaseModel):
    """Stored requests carry no enforced schema; only the id is guaranteed."""

    id: str
    schedule_id: Optional[str] = None
    member_id: Optional[str] = None
    member_name: Optional[str] = None
    member_email: Optional[str] = None
    member_contact: Optional[str] = None
    member_address: Optional[str] = None
    member_purok: Optional[str] = None
    church_name: Optional[str] = None
    number_of_members: Optional[int] = None
    created_at: Optional[datetime] = None


class PendingBookingOut(BookingRequestOut):
    """A request merged with its (pending) schedule's display fields."""

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: Optional[str] = None


class MemberBookingOut(BookingRequestOut):
    schedule_status: Optional[str] = None
    schedule_title: Optional[str] = None
    schedule_location: Optional[str] = None
    schedule_start_time: Optional[datetime] = None
    schedule_end_time: Optional[datetime] = None
    assigned_pastor: str = "N/A"


class AssignPastor(BaseModel):
    pastor_name: str = ""
