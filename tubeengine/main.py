import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.routing import Mount

from tubeengine.config import get_settings
from tubeengine.exceptions import AuthenticationError, IntegrationError, RateLimitError
from tubeengine.mcp_server import mcp
from tubeengine.routers.youtube import router as youtube_router


api = FastAPI(title="Tubeengine", version="0.1.0")
api.include_router(youtube_router)


@api.get("/api/status")
def api_status() -> dict:
    return {"youtube": {"ready": bool(get_settings().youtube_api_key)}}


# --- Exception handlers ---

@api.exception_handler(AuthenticationError)
async def auth_error_handler(request: Request, exc: AuthenticationError):
    return JSONResponse(status_code=401, content={"error_code": "auth_error", "message": str(exc)})


@api.exception_handler(IntegrationError)
async def integration_error_handler(request: Request, exc: IntegrationError):
    return JSONResponse(status_code=500, content={"error_code": "integration_error", "message": str(exc)})


@api.exception_handler(RateLimitError)
async def rate_limit_error_handler(request: Request, exc: RateLimitError):
    return JSONResponse(status_code=429, content={"error_code": "rate_limit", "message": str(exc)})


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)

app = Starlette(
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
    lifespan=mcp_app.lifespan,
)


def run():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "tubeengine.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
