from fastapi import APIRouter

from src.domain.base import utc_now

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    return {"status": "ok", "timestamp": utc_now().isoformat()}
