"""
Prozessweiter Connection-Pool.

Eine Instanz (Container/VM) baut den Pool genau einmal beim Kaltstart auf;
jeder warme Aufruf derselben Instanz bekommt exakt dieses Objekt zurück.
Wird die Instanz vom Host recycelt, beginnt alles wieder bei "uninitialized".
"""
from __future__ import annotations

from typing import Optional
import logging
import threading

import psycopg
from psycopg_pool import ConnectionPool

from pgfunction.config import settings
from pgfunction.env import log_execution_start
from pgfunction.errors import (
    DatabaseInitError,
    LivenessError,
    PoolOpenError,
    PoolUnavailableError,
)
from pgfunction.models.schemas import PoolLimits, PoolState, PoolStatus
from pgfunction.services.db_config import (
    build_conninfo,
    load_database_config,
    redacted_conninfo,
)

log = logging.getLogger("uvicorn")

LIMITS = PoolLimits()

_lock = threading.Lock()
_state: PoolState = "uninitialized"
_pool: Optional[ConnectionPool] = None
_error: Optional[DatabaseInitError] = None

def _open_pool(conninfo: str) -> ConnectionPool:
    # open=False + open(wait=False): nicht blockierend, garantiert noch keine Verbindung
    pool = ConnectionPool(
        conninfo=conninfo,
        min_size=LIMITS.max_idle,
        max_size=LIMITS.max_open,
        max_idle=LIMITS.max_idle_seconds,
        open=False,
    )
    pool.open(wait=False)
    return pool

def _ping(pool: ConnectionPool) -> None:
    with pool.connection(timeout=settings.ping_timeout) as conn:
        conn.execute("SELECT 1")

def _connect() -> ConnectionPool:
    config = load_database_config()

    try:
        conninfo = build_conninfo(config)
        log.info(f"Connecting to database with URI: {redacted_conninfo(config)}")
        pool = _open_pool(conninfo)
    except (psycopg.Error, ValueError) as exc:
        log.error(f"Error opening the database pool: {exc}")
        raise PoolOpenError(f"pool open: {exc}") from exc

    try:
        _ping(pool)
    except psycopg.Error as exc:
        log.error(f"Error pinging the database: {exc}")
        pool.close()
        raise LivenessError(f"DB ping error: {exc}") from exc

    log.info("Database successfully pinged")
    return pool

def initialize() -> ConnectionPool:
    """
    Baut den geteilten Pool auf oder gibt den vorhandenen zurück.

    - ready  -> derselbe Pool, keine neuen Verbindungen
    - failed -> der gespeicherte Fehler wird erneut geworfen (kein Retry)
    """
    global _state, _pool, _error
    with _lock:
        if _state == "ready" and _pool is not None:
            return _pool
        if _state == "failed" and _error is not None:
            raise _error

        log_execution_start("initialize")
        _state = "initializing"
        try:
            pool = _connect()
        except DatabaseInitError as exc:
            _state, _error = "failed", exc
            raise
        except Exception as exc:
            # Unerwartetes darf den Zustand nicht in "initializing" hängen lassen
            log.error(f"Unexpected error opening the database pool: {exc!r}")
            _state, _error = "failed", PoolOpenError(f"pool open: {exc!r}")
            raise _error from exc

        _state, _pool, _error = "ready", pool, None
        return pool

def startup() -> None:
    """Kaltstart-Hook: Fehler werden nur geloggt, es gibt keine höhere Instanz."""
    try:
        initialize()
    except DatabaseInitError as exc:
        log.error(f"Error connecting the database: {exc}")

def get_pool() -> ConnectionPool:
    if _state == "ready" and _pool is not None:
        return _pool
    raise PoolUnavailableError(_state, _error)

def status() -> PoolStatus:
    return PoolStatus(
        state=_state,
        limits=LIMITS,
        error=str(_error) if _error is not None else None,
    )

def close() -> None:
    global _state, _pool, _error
    with _lock:
        if _pool is not None:
            _pool.close()
            log.info("Database pool closed")
        _state, _pool, _error = "uninitialized", None, None
