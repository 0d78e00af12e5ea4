from fastapi import APIRouter

from motor_cotacao.infrastructure.duckdb_connection import get_connection

router = APIRouter()


@router.get("/health")
def health() -> dict[str, str]:
    with get_connection().cursor() as cur:
        cur.execute("SELECT 1").fetchone()
    return {"status": "ok"}
