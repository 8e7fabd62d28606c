"""Liveness endpoint."""

from fastapi import APIRouter

from voicemail_service.response_models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()
