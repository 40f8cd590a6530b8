"""
Database entity models.

Each module maps one table:

- users: personnel records identified by an RFID tag
- weapons: weapons issued to a user, identified by their own RFID tag
- access_log: append-only record of actions performed by users
"""

from .access_log import AccessLogEntry
from .users import User
from .weapons import Weapon

__all__ = [
    "AccessLogEntry",
    "User",
    "Weapon",
]
