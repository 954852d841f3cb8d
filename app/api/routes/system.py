from fastapi import APIRouter, Request

from api.dependencies.rate_limits import get_limiter
from infrastructure.http import responses
from infrastructure.services import ResponseSinkDep, SettingsDep

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Load balancer and uptime checks hit these every few seconds
@router.get("/version")
@limiter.limit("50/minute")
def get_version(
    request: Request, sink: ResponseSinkDep, settings: SettingsDep
):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return responses.success_with_data(sink, {"version": settings.GIT_SHA})


@router.get("/health")
@limiter.limit("50/minute")
def get_health(request: Request, sink: ResponseSinkDep):  # pylint: disable=unused-argument
    """Healthcheck endpoint."""
    return responses.success_with_data(sink, {"status": "ok"})
