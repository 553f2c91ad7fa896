from __future__ import annotations
from typing import List, Optional


class DatabaseInitError(RuntimeError):
    """Base for everything that stops the shared pool from becoming usable."""


class ConfigurationError(DatabaseInitError):
    def __init__(self, missing: List[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            "missing environment variable for database connection: " + ", ".join(self.missing)
        )


class PoolOpenError(DatabaseInitError):
    pass


class LivenessError(DatabaseInitError):
    pass


class PoolUnavailableError(DatabaseInitError):
    """Raised when a caller asks for the pool before it is ready or after it failed."""

    def __init__(self, state: str, cause: Optional[BaseException] = None) -> None:
        self.state = state
        self.cause = cause
        msg = f"database pool unavailable (state={state})"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


class EnvironmentFileError(RuntimeError):
    pass
