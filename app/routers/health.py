from fastapi import APIRouter, Depends, HTTPException, status

from app.settings import Settings, get_settings

router = APIRouter(prefix="/health", tags=["system"])


@router.get("/", summary="Liveness: the process is serving requests")
async def liveness() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/ready", summary="Readiness: a greeting is configured")
async def readiness(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    if not settings.greeting:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No greeting configured",
        )
    return {"status": "ready"}
