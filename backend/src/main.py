import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from shared.build_info import BuildInfo
from shared.config import settings
from shared.dependencies import build_info, get_build_info
from shared.exceptions import AppError
from shared.infrastructure.database import check_connection, engine
from shared.infrastructure.redis import close_redis_pool
from users.interfaces.routes import router as users_router
from users.interfaces.schemas import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await check_connection()
    _log_banner(build_info)
    yield
    logger.info("shutting down")
    await engine.dispose()
    await close_redis_pool()


def _log_banner(info: BuildInfo) -> None:
    logger.info("################################################")
    logger.info("User API server starting on %s:%s", settings.HOST, settings.PORT)
    for key, value in info.as_dict().items():
        logger.info("%s: %s", key, value)
    logger.info("Graceful shutdown period: %ss", settings.SHUTDOWN_GRACE_PERIOD)
    logger.info("################################################")


app = FastAPI(
    title="User API",
    version=build_info.version or "0.1.0",
    lifespan=lifespan,
)

app.include_router(users_router)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return _error(exc.status_code, exc.message)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    # Surface the driver's own message, not SQLAlchemy's statement dump.
    message = str(exc.orig) if isinstance(exc, DBAPIError) and exc.orig else str(exc)
    logger.warning("%s %s failed: %s", request.method, request.url.path, message)
    return _error(500, message)


@app.get("/")
async def health_check(info: BuildInfo = Depends(get_build_info)):
    return {"ok": True, **info.as_dict()}


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        timeout_keep_alive=settings.TIMEOUT_KEEP_ALIVE,
        timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_PERIOD,
        log_level="info",
    )


if __name__ == "__main__":
    run()
