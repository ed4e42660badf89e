"""Health check route"""

from fastapi import APIRouter, Request

from api.responses import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health-check", response_model=HealthResponse)
def health_check(request: Request):
    """Basic health check endpoint"""
    settings = request.app.state.settings
    return HealthResponse(
        status="ok", service=settings.app_name, version=settings.app_version
    )
