"""
Inner Peace Backend — Health Check Route
=========================================

What:  Liveness endpoint for the client app, load balancers and Docker.
How:   Answers {"status": "ok"} without touching the database, so it
       stays green while the store is being provisioned via /init-db.
"""

from fastapi import APIRouter

from inner_peace.schemas.post import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service liveness check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok")
