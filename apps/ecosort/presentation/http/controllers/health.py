"""Health Check Controller."""

from fastapi import APIRouter

from ecosort import __version__

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크."""
    return {"status": "ok", "service": "ecosort-api", "version": __version__}


@router.get("/ready")
async def ready() -> dict:
    """서비스 준비 상태 체크.

    API Key가 없어도 ready (분류 요청 시점에 설정 오류로 보고).
    """
    return {"status": "ready"}
