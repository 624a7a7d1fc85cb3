import logging

from fastapi import APIRouter, FastAPI

from healthsvc.logging_config import configure_logging
from healthsvc.schemas import HealthStatus
from healthsvc.server import serve
from healthsvc.settings import API_PREFIX

logger = logging.getLogger("healthcheck")

router = APIRouter()


@router.get("/healthcheck", response_model=HealthStatus)
async def health_check() -> HealthStatus:
    logger.info("Health check endpoint called")
    return HealthStatus()


def create_app() -> FastAPI:
    app = FastAPI(title="healthsvc", docs_url=None, redoc_url=None, openapi_url=None)
    app.include_router(router, prefix=API_PREFIX)
    return app


app = create_app()


def main() -> None:
    configure_logging()
    logging.getLogger(__name__).info("Configured logger")
    serve(app)


if __name__ == "__main__":
    main()
