from contextlib import asynccontextmanager
from anyio import to_thread
from fastapi import FastAPI
from pgfunction import db
from pgfunction.config import settings
from pgfunction.routers import database

__version__ = "0.1.0"

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Kaltstart: genau einmal pro Instanz; der Ping blockiert, also im Worker-Thread
    await to_thread.run_sync(db.startup)
    yield
    db.close()

app = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)
app.include_router(database.router)

@app.get("/")
def root():
    return {"name": settings.app_name, "version": __version__}
