from fastapi import APIRouter

from ..schemas import ReadyResponse

router = APIRouter()


@router.get("/ready", response_model=ReadyResponse)
def ready():
    return {"ok": True}
