import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import Settings, get_settings
from .core.dependencies import get_password_hasher
from .routers import api_router          # all your sub-routers live here
from .services.database import get_db
from .services.users import MongoUserRepository

log = logging.getLogger("app")

# bodies FastAPI can't even parse get the same 400 the controller gives
_MALFORMED_BODY = {
    "/users": "Name, email and password are required",
    "/login": "Email and password are required",
}


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title=settings.app_name)
    app.include_router(api_router)

    @app.exception_handler(RequestValidationError)
    async def _malformed_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        log.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        message = _MALFORMED_BODY.get(request.url.path.rstrip("/"), "Invalid request")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    # unique e-mail index -------------------------------------------------
    @app.on_event("startup")
    async def _ensure_indexes() -> None:
        await MongoUserRepository(get_db(), get_password_hasher()).ensure_indexes()
        log.info("User indexes ready")

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"ok": True}

    return app


app = create_app()
