import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, load_settings
from app.errors import register_exception_handlers
from app.routes.user import router as user_router
from app.utils.logger import (
    bind_request_id,
    clear_request_id,
    configure_logging,
    get_logger,
)

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(level=settings.log_level, fmt=settings.log_format)

    app = FastAPI(
        title=settings.title,
        description=settings.description,
        version=settings.version,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = bind_request_id(request.headers.get(REQUEST_ID_HEADER))
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_request_id()

    register_exception_handlers(app)

    # Routes
    app.include_router(user_router, prefix="/users")

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": f"{settings.title} is online"}

    return app


def run() -> None:
    settings = load_settings()
    # create_app runs inside the server process, not at import
    uvicorn.run(
        "app.main:create_app", factory=True, host=settings.host, port=settings.port
    )


if __name__ == "__main__":
    run()
