from fastapi import HTTPException
from psycopg_pool import ConnectionPool
from pgfunction import db
from pgfunction.errors import PoolUnavailableError

def get_pool() -> ConnectionPool:
    # Nur Zugriff, nie Initialisierung: das passiert einmal im Lifespan
    try:
        return db.get_pool()
    except PoolUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
