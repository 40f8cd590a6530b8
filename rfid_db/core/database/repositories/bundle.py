"""
Repository bundle for dependency injection.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .access_log import AccessLogRepository
from .users import UserRepository
from .weapons import WeaponRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories sharing one session."""

    users: UserRepository
    weapons: WeaponRepository
    access_log: AccessLogRepository


def build_sql_repos(session: AsyncSession) -> SqlRepoBundle:
    """Build a ``SqlRepoBundle`` over an already-open session.

    Args:
        session: Async session the repositories will share

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        weapons=WeaponRepository(session),
        access_log=AccessLogRepository(session),
    )
