"""User roles - the single canonical representation of admin/pastor/member."""
import enum


class Role(str, enum.Enum):
    admin = "admin"
    pastor = "pastor"
    member = "member"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Accept any casing ("Pastor", "ADMIN") and return the canonical member.

        Raises ValueError for anything outside the enumeration.
        """
        if isinstance(value, cls):
            return value
        return cls((value or "").strip().lower())
