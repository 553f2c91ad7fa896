import psycopg
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from psycopg_pool import ConnectionPool
from pgfunction import db
from pgfunction.config import settings
from pgfunction.deps import get_pool
from pgfunction.models.schemas import PoolStatus

router = APIRouter(prefix="/v1/db", tags=["database"])

@router.get("/health", response_model=PoolStatus)
def health():
    st = db.status()
    code = 200 if st.state == "ready" else 503
    return JSONResponse(status_code=code, content=st.model_dump())

@router.get("/ping")
def ping(pool: ConnectionPool = Depends(get_pool)):
    # Pool ist bereit, aber die DB kann inzwischen weg sein
    try:
        with pool.connection(timeout=settings.ping_timeout) as conn:
            conn.execute("SELECT 1")
    except psycopg.Error as exc:
        raise HTTPException(status_code=503, detail=f"database unreachable: {exc}") from exc
    return {"status": "ok"}
