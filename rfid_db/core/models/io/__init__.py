"""
I/O models for API requests and responses.

These models are separate from the database entities so the API contract can
evolve independently of the table definitions.

Modules:
- users: user I/O models
- weapons: weapon I/O models
- access_log: access log I/O models
"""

from .access_log import AccessLogCreate, AccessLogRead
from .users import UserCreate, UserRead
from .weapons import ErrorResponse, WeaponCreate, WeaponRead

__all__ = [
    "AccessLogCreate",
    "AccessLogRead",
    "ErrorResponse",
    "UserCreate",
    "UserRead",
    "WeaponCreate",
    "WeaponRead",
]
