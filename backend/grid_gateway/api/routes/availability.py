"""
Availability API: the grid endpoint consumed by the calendar front-end.

GET /api/v1/availability?tenantId=&start=&end=  (tenant= accepted for backwards compatibility)
"""
import logging
from typing import Any

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from grid_gateway.core.errors import GridGatewayError, grid_error_to_response
from grid_gateway.services.availability_service import fetch_availability

router = APIRouter()
logger = logging.getLogger(__name__)

MSG_MISSING_PARAMS = "Missing required parameters: tenantId (or tenant), start, end"


@router.get("/availability", response_model=None)
async def get_availability(
    tenant_id: str | None = Query(None, alias="tenantId"),
    tenant: str | None = Query(None),
    start: str | None = Query(None),
    end: str | None = Query(None),
) -> dict[str, Any] | JSONResponse:
    """Normalized availability grid for the tenant's provider over [start, end]."""
    tid = (tenant_id or tenant or "").strip()
    start = (start or "").strip()
    end = (end or "").strip()
    if not tid or not start or not end:
        return JSONResponse(status_code=400, content={"error": MSG_MISSING_PARAMS})
    try:
        return await fetch_availability(tid, start, end)
    except GridGatewayError as e:
        logger.warning("Availability for tenant %s failed: %s", tid, e)
        return grid_error_to_response(e)
    except Exception as e:
        logger.exception("Availability for tenant %s failed: %s", tid, e)
        return grid_error_to_response(e)
