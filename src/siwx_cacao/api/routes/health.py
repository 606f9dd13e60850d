from fastapi import APIRouter

from siwx_cacao.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness check")
def health() -> dict[str, object]:
    return {"ok": True, "service": settings.app_name}
