"""
Liveness and version endpoints for the RFID database service.

Load balancers poll ``/health`` to tell whether the process is serving
requests. ``/version`` reports the release and the table layout version the
handlers expect. Neither endpoint acquires a connection from the pool, so both
answer even while the database is down.
"""

from fastapi import APIRouter

from rfid_db.server.core import constant

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Liveness",
    description="Report that the service process is up. Does not check the database.",
)
async def health_check():
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Service Version",
    description="Service release and the version of the users/weapons/access_log layout it serves.",
)
async def version():
    """The schema version changes only when a column of the three tables changes."""
    return {"version": constant.VERSION, "schema_version": constant.SCHEMA_VERSION}
