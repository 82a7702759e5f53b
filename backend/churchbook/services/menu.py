"""Navigation menu - a static link table filtered by role."""
from dataclasses import dataclass

from churchbook.models.role import Role


@dataclass(frozen=True)
class MenuLink:
    label: str
    icon: str
    screen: str
    roles: tuple[Role, ...]


MENU: tuple[MenuLink, ...] = (
    MenuLink("Dashboard", "chart-bar", "DashboardScreen", (Role.pastor, Role.member)),
    MenuLink("Add Users", "users", "add", (Role.pastor,)),
    MenuLink("Manage Users", "users", "manageuser", (Role.pastor,)),
    MenuLink("Members", "users", "ManagerUserScreen", (Role.pastor,)),
    MenuLink("Add Schedule", "calendar-alt", "adddSchedule", (Role.pastor,)),
    MenuLink("Schedule", "calendar-alt", "ManagerSchedule", (Role.pastor, Role.member)),
    MenuLink("Request Appointment", "calendar-alt", "BookingScreen", (Role.member,)),
    MenuLink("Appointments", "handshake", "listt", (Role.admin, Role.pastor)),
    MenuLink("Visit Schedules", "route", "VisitSchedule", (Role.pastor, Role.member)),
    MenuLink("Prayer & Devotion", "praying-hands", "AddPrayerTracker", (Role.pastor,)),
    MenuLink("Log Prayers and Devotions", "praying-hands", "logs", (Role.member,)),
    MenuLink("Logout", "sign-out-alt", "Login", (Role.admin, Role.pastor, Role.member)),
)

MENU_TITLES = {
    Role.admin: "Admin Menu",
    Role.pastor: "Pastor Menu",
    Role.member: "Member Menu",
}


def visible_links(role: Role) -> list[MenuLink]:
    return [link for link in MENU if role in link.roles]
