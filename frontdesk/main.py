"""Front Desk Relay - FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from frontdesk.config import get_settings
from frontdesk.staff.routes import router as staff_router

logger = logging.getLogger(__name__)

METHOD_NOT_SUPPORTED_TEXT = "Method not supported"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: refuse to serve without a bot token
    settings = get_settings()
    settings.validate()
    logger.info("Front Desk Relay started, Slack API at %s", settings.SLACK_API_URL)

    yield

    logger.info("Front Desk Relay stopped")


app = FastAPI(
    title="Front Desk Relay",
    description="Relays kiosk visitor announcements to staff over Slack.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS - allow the kiosk UI origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def _method_not_supported(request: Request, exc: StarletteHTTPException):
    """Answer unsupported methods with plain text; defer everything else."""
    if exc.status_code == 405:
        return PlainTextResponse(
            METHOD_NOT_SUPPORTED_TEXT, status_code=405, headers=exc.headers
        )
    return await http_exception_handler(request, exc)


# Routes
app.include_router(staff_router)
