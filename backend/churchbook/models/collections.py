"""Collection names and per-collection status values."""
import enum


class Collection(str, enum.Enum):
    users = "users"
    schedules = "schedules"
    request_bookings = "request_bookings"
    appointments = "appointments"
    visit_schedules = "Visit_Schedules"
    prayer_devotion_tracker = "prayer_devotion_tracker"
    reminders = "reminders"
    notifications = "notifications"


class ScheduleStatus(str, enum.Enum):
    none = "none"
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# Appointments keep their own capitalised state space; do not merge with ScheduleStatus.
class AppointmentStatus(str, enum.Enum):
    pending = "pending"
    approved = "Approved"
    rejected = "Rejected"


class VisitStatus(str, enum.Enum):
    pending = "Pending"
