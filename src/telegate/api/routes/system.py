from fastapi import APIRouter
from fastapi.responses import Response

from telegate.api.schemas.system import HealthResponse
from telegate.core.metrics import metrics_response

router = APIRouter(tags=["system"])


@router.get("/healthz", response_model=HealthResponse)
def healthz() -> HealthResponse:
    """Liveness probe used by orchestrators."""
    return HealthResponse(status="ok")


@router.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    """Prometheus scrape endpoint."""
    return metrics_response()
