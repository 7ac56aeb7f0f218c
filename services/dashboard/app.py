"""Dashboard service entrypoint."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from libs.infra.logging_config import setup_logging
from services.dashboard.dependencies import get_dashboard_service, settings
from services.dashboard.presentation.http.routes import router


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging(level=settings.log_level, log_dir=settings.log_dir)
    yield
    get_dashboard_service().shutdown()


app = FastAPI(title="Drowsiness Dashboard", lifespan=lifespan)
app.include_router(router)


def main() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
