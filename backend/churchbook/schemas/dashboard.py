"""Pydantic schemas for the dashboard and menu."""
from pydantic import BaseModel


class DashboardCounts(BaseModel):
    total_users: int
    schedules: int
    appointments: int
    visit_schedules: int
    prayer_logs: int
    pending_bookings: int


class MenuLinkOut(BaseModel):
    label: str
    icon: str
    screen: str


class MenuOut(BaseModel):
    title: str
    role: str
    links: list[MenuLinkOut]
