import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from invoicing.api.auth import router as auth_router
from invoicing.api.customers import router as customers_router
from invoicing.api.errors import register_exception_handlers
from invoicing.api.invoices import router as invoices_router
from invoicing.core.config import Settings, settings
from invoicing.db.engine import create_db_engine, init_schema

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(app_settings.database_url)
        init_schema(engine)
        app.state.engine = engine
        if app_settings.uses_insecure_secret:
            logger.warning("JWT_SECRET is not set; using the built-in development secret")
        logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(
        title="Invoice Management API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    register_exception_handlers(app)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(auth_router, prefix="/api")
    app.include_router(customers_router, prefix="/api")
    app.include_router(invoices_router, prefix="/api")

    return app


app = create_app()
