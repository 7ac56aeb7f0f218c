"""Directions proxy entrypoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from libs.infra.logging_config import setup_logging
from services.directions_proxy.dependencies import settings
from services.directions_proxy.presentation.http.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging(level=settings.log_level)
    logger.info("Proxy server running on http://localhost:%d", settings.port)
    yield


app = FastAPI(title="Directions Proxy", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


def main() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
