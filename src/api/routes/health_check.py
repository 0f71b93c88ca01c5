from fastapi import APIRouter
from sqlalchemy import text

from src.depends import engine

router = APIRouter()


@router.get("/health")
async def health_check():
    """Liveness plus a round trip to the database"""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    return {"status": "ok"}
