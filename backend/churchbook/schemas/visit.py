"""Pydantic schemas for Visit Schedules."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class VisitCreate(BaseModel):
    appointment_id: str
    visit_date: str = ""  # YYYY-MM-DD
    visit_notes: str = ""


class VisitOut(BaseModel):
    id: str
    appointment_id: Optional[str] = None
    member_id: Optional[str] = None
    pastor_id: Optional[str] = None
    visit_date: Optional[str] = None
    visit_notes: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
