"""Pydantic schemas for personal reminders and notifications."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class ReminderCreate(BaseModel):
    text: str = ""


class ReminderOut(BaseModel):
    id: str
    user_id: Optional[str] = None
    text: Optional[str] = None
    reminded: bool = False
    created_at: Optional[datetime] = None


class NotificationCreate(BaseModel):
    user_id: str
    message: str = ""


class NotificationOut(BaseModel):
    id: str
    user_id: Optional[str] = None
    message: Optional[str] = None
    is_read: bool = False
    created_at: Optional[datetime] = None
