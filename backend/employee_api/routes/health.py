"""
Employee List Backend — Health Check Route
============================================

What:  Health check endpoint for monitoring and load balancer probes.
Why:   Operators need to see at a glance whether the process is up and
       whether persistence is working.
How:   Reports the store handle's connection-state code (dbState) and, when
       connected, pings the database with SELECT 1.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    ok:        store connected and answering
    degraded:  process is up but persistence is disabled, disconnected or
               not answering (employee routes will fail)

The endpoint always answers 200: the process itself is healthy and keeps
serving the frontend even without a database.
"""

import logging
import time

from fastapi import APIRouter, Depends

from employee_api import __version__
from employee_api.database import Database, get_database
from employee_api.schemas.employee import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description=(
        "Returns the service status and the store connection-state code "
        "(0 disconnected, 1 connected, 2 connecting, 3 disconnecting)."
    ),
)
async def health_check(database: Database = Depends(get_database)) -> HealthResponse:
    if not database.configured:
        db_status = "disabled"
    elif not database.is_connected:
        db_status = "disconnected"
    elif await database.ping():
        db_status = "connected"
    else:
        db_status = "unreachable"

    return HealthResponse(
        status="ok" if db_status == "connected" else "degraded",
        dbState=int(database.state),
        database=db_status,
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
