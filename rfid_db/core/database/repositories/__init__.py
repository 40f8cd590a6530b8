"""
Database repository layer using SQLModel.

Modules:
- base: AsyncBaseRepository interface
- users, weapons, access_log: one repository per table
- bundle: SqlRepoBundle grouping the repositories of one session
"""

from .access_log import AccessLogRepository
from .base import AsyncBaseRepository
from .bundle import SqlRepoBundle, build_sql_repos
from .users import UserRepository
from .weapons import WeaponRepository

__all__ = [
    "AccessLogRepository",
    "AsyncBaseRepository",
    "SqlRepoBundle",
    "UserRepository",
    "WeaponRepository",
    "build_sql_repos",
]
