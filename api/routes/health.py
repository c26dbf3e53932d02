from fastapi import APIRouter

from app.db import check_db_connection
from schemas.common import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Report whether the database answers."""
    services = {"database": check_db_connection()}
    overall_status = "healthy" if all(services.values()) else "degraded"
    return {"status": overall_status, "services": services}
