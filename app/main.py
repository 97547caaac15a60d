"""
FastAPI application — Entry point
=================================

Role
----
- Instantiates the FastAPI app and mounts the routers (players, servers, health).
- Renders every error as `{"error": "<message>"}` (format expected by the proxy/hubs).
- Logs the storage location and the route list at startup.

Notes
-----
- Router imports are explicit to avoid auto-discovery surprises.
- Auth is declared per router (`Depends(api_key_required)`), /health stays open.
- Invalid request bodies answer 400 (not FastAPI's default 422).
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.routes.health import router as health_router
from app.routes.players import router as players_router
from app.routes.servers import router as servers_router

from app.config.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# --- Main FastAPI app ---
app = FastAPI(title=settings.APP_NAME)

# ===========================
# Error format
# ===========================
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def invalid_payload(request: Request, exc: RequestValidationError):
    logger.info("Invalid request payload", extra={"path": request.url.path, "errors": exc.errors()})
    return JSONResponse(status_code=400, content={"error": "Invalid request payload"})

# ===========================
# Routers
# ===========================
app.include_router(players_router)
app.include_router(servers_router)
app.include_router(health_router)


# --- Startup hook ---
@app.on_event("startup")
async def list_routes():
    """
    At startup:
    - logs the mock database location,
    - lists the routes (path + methods) for diagnostics.
    """
    logger.info("Player storage: %s (strict ranks: %s)", settings.players_path, settings.STRICT_RANKS)
    for r in app.routes:
        methods = getattr(r, "methods", None)
        if methods:
            logger.info("Route %s %s", r.path, sorted(methods))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
