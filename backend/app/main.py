from fastapi import FastAPI

from app.api.errors import register_error_handlers
from app.api.routers import uploads as uploads_router
from app.core.config import get_settings
from app.core.log import configure_logging


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Upload URL Issuer",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    register_error_handlers(app)
    app.include_router(uploads_router.router)

    return app


app = create_app()
