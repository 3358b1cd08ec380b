from fastapi import APIRouter

from inventory_intake.core.settings import settings

router = APIRouter(
    tags=["health"],
    redirect_slashes=False
)

@router.get("/ping", summary="Liveness probe")
async def ping():
    return {"status": "ok", "service": settings.APP_NAME}
