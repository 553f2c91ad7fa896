# Lokaler Start: python -m pgfunction
import logging
import uvicorn
from pgfunction.config import settings
from pgfunction.env import load_environment

def main() -> None:
    logging.basicConfig(level=settings.log_level)
    load_environment()
    uvicorn.run(
        "pgfunction.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

if __name__ == "__main__":
    main()
