"""FastAPI application entrypoint

Gateway for both listing services (races, sports events).

Run: uvicorn listings.main:app --reload   (from backend/)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from listings.api.racing import router as racing_router
from listings.api.sports import router as sports_router
from listings.config import settings
from listings.database import engine
from listings.services.seed import seed_all

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_ON_STARTUP:
        seed_all(engine, settings.SEED_ROW_COUNT)
    yield


app = FastAPI(
    title="Racing & Sports Listings API",
    version="0.1.0",
    description="Read-only race and sporting event listings with safe filtering and ordering",
    lifespan=lifespan,
)

app.include_router(racing_router)
app.include_router(sports_router)


@app.get("/health")
def health_check():
    """Health check"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("listings.main:app", host="127.0.0.1", port=8000, reload=True)
