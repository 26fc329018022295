from fastapi import APIRouter, Request
from app.schemas.health import HealthResponse, StatusResponse
from app.core.ids import utc_timestamp

router = APIRouter(tags=["Health"])


@router.api_route("", methods=["GET", "HEAD"], response_model=HealthResponse)
@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
def health_check(request: Request):
    """Liveness check. Does not touch storage."""
    return HealthResponse(service=request.app.state.settings.SERVICE_NAME, ts=utc_timestamp())


@router.get("/status", response_model=StatusResponse)
def service_status(request: Request):
    return StatusResponse(message=f"{request.app.state.settings.SERVICE_NAME} running")
