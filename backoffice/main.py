import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backoffice.api import dashboard, reports
from backoffice.api.crud import build_crud_router
from backoffice.core.config import CORS_ORIGINS, LOG_LEVEL, SEED_SAMPLE_DATA
from backoffice.core.errors import BackOfficeError
from backoffice.resources import RESOURCES, resource_for_path
from backoffice.storage.store import ResourceStore
from backoffice.utils.seed import seed_sample_data

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BackOfficeError)
    async def back_office_error_handler(request: Request, exc: BackOfficeError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Field-level detail stays in the log, the caller gets the generic message
        resource = resource_for_path(request.url.path)
        message = resource.invalid_message if resource else "Invalid request data"
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(store: Optional[ResourceStore] = None) -> FastAPI:
    """
    Builds the API. Passing a store makes the app use it as-is; otherwise
    one is created on start-up from DATABASE_URL and closed on shutdown.
    """
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = getattr(app.state, "store", None) is None
        if owned:
            app.state.store = ResourceStore()
            if SEED_SAMPLE_DATA:
                seed_sample_data(app.state.store)
        logger.info("Back office API ready")
        yield
        if owned:
            app.state.store.close()
            app.state.store = None

    app = FastAPI(title="Back Office API", version="1.0.0", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(dashboard.router)
    app.include_router(reports.router)
    for resource in RESOURCES:
        app.include_router(build_crud_router(resource))

    @app.get("/")
    def root():
        return {"message": "Back office API"}

    return app


app = create_app()
