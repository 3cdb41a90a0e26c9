from contextlib import asynccontextmanager
from pathlib import Path
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from . import __version__
from .api.routes import router as api_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .db.base import Base
from .db.session import make_engine, make_session_factory
from .services.mailer import Mailer
from .services.security import TokenService
from .services.uploads import LocalFileArea, UploadIntake

logger = logging.getLogger(__name__)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"message": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "Invalid request body"
        if errors:
            loc = ".".join(str(p) for p in errors[0]["loc"] if p != "body")
            message = f"{loc}: {errors[0]['msg']}" if loc else errors[0]["msg"]
        return JSONResponse({"message": message}, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse({"message": "Server error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    engine = make_engine(settings.DATABASE_URL)
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=engine)
        logger.info(f"Farmhub ready, uploads served from {upload_dir} at {settings.UPLOAD_URL_PREFIX}")
        yield
        engine.dispose()

    app = FastAPI(title="Farmhub API", version=__version__, lifespan=lifespan)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.token_service = TokenService(settings.SECRET_KEY, minutes=settings.ACCESS_TOKEN_MIN)
    app.state.upload_intake = UploadIntake(
        LocalFileArea(upload_dir, settings.UPLOAD_URL_PREFIX),
        max_bytes=settings.MAX_UPLOAD_BYTES,
    )
    app.state.mailer = Mailer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _install_error_handlers(app)

    # ✅ Register routes
    app.include_router(api_router, prefix="/api")
    app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=upload_dir), name="uploads")
    return app

