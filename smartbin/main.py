import time
import logging
from dotenv import load_dotenv

# Load environment variables from .env file before anything else
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from smartbin.core.config import Settings, settings as default_settings
from smartbin.core.logging import setup_logging, request_id_ctx
from smartbin.core.db import build_engine, build_sessionmaker, init_models
from smartbin.core.errors import register_exception_handlers
from smartbin.api.router import api_router
from smartbin.platform.ports.media_host import MediaHostPort
from smartbin.platform.provider_registry import build_media_host

logger = logging.getLogger(__name__)

def create_app(settings: Settings | None = None, media_host: MediaHostPort | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.APP_NAME)

    # collaborators are built once here and handed to handlers via Depends
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)
    app.state.media_host = media_host or build_media_host(settings)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = (time.time() - start_time) * 1000
        formatted_process_time = f"{process_time:.2f}ms"

        logger.info(
            f"Request: {request.method} {request.url.path} - Response: {response.status_code} - Time: {formatted_process_time}"
        )

        return response

    # registered last so it runs first and the request id is set for log_requests
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        rid = request.headers.get("x-request-id", "-")
        token = request_id_ctx.set(rid)
        try:
            return await call_next(request)
        finally:
            request_id_ctx.reset(token)

    register_exception_handlers(app)

    @app.on_event("startup")
    async def on_startup():
        await init_models(engine, settings)
        logger.info(f"{settings.APP_NAME} started (env={settings.ENV}, media host={settings.MEDIA_HOST_PROVIDER})")

    @app.on_event("shutdown")
    async def on_shutdown():
        await engine.dispose()

    app.include_router(api_router, prefix=settings.API_PREFIX)

    if settings.MEDIA_HOST_PROVIDER == "local" and media_host is None:
        app.mount("/media", StaticFiles(directory=settings.LOCAL_MEDIA_ROOT), name="media")

    return app

app = create_app()
