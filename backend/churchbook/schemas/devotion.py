"""Pydantic schemas for prayer & devotion logs."""
import datetime as dt
from typing import Optional
from pydantic import BaseModel


class DevotionLogCreate(BaseModel):
    user_id: str
    date: dt.date
    devotion_text: str = ""
    prayer_text: str = ""


class DevotionLogOut(BaseModel):
    id: str
    user_id: Optional[str] = None
    date: Optional[dt.date] = None
    devotion_text: Optional[str] = None
    prayer_text: Optional[str] = None
    user_name: Optional[str] = None
    created_at: Optional[dt.datetime] = None
