"""
Health check routes for monitoring.
"""
from fastapi import APIRouter
from src.models.dto.object_dto import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse()
