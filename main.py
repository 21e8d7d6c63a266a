# /main.py
# This is the main entry point for the PR Changelog Summarizer. It sets up the FastAPI app, including configuration, routes, services, and error handling.
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn

from settings import settings
from utils.errors import AppError
from api.routes import router
from services.credential_store import CredentialStore
from services.github_client import GitHubClient
from services.llm_client import OpenAILLMClient
from services.summarize_service import SummarizeService
import api.summarize as summarize_mod

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Optional Django UI mount -- the form-driven interface at /ui. Can be disabled in production or if Django setup is not desired.
def mount_django(app: FastAPI) -> None:
    if not settings.enable_django_ui:
        logger.info("Django UI disabled (ENABLE_DJANGO_UI is False)")
        return
    try:
        os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django_ui.settings")
        from django.core.asgi import get_asgi_application
        django_app = get_asgi_application()
        app.mount("/ui", django_app) ## GO to localhost:8000/ui to access the Django UI
        logger.info("Django UI mounted at /ui")
    except Exception:
        logger.exception("Django UI failed to mount")


@asynccontextmanager # For FastAPI lifespan event, to initialize and cleanup the HTTP clients.
async def lifespan(app: FastAPI):
    github = GitHubClient()
    llm = OpenAILLMClient()
    svc = SummarizeService(github=github, llm=llm)
    credentials = CredentialStore(settings.credential_store_path)

    # expose service on app.state and patch dependencies in summarize.py
    app.state.svc = svc
    app.state.credentials = credentials

    summarize_mod.get_service = lambda: app.state.svc
    summarize_mod.get_credentials = lambda: app.state.credentials

    # inject service and credential store into Django UI
    if settings.enable_django_ui:
        import django_ui.views as django_views
        django_views._svc = svc
        django_views._credentials = credentials

    yield

    await github.aclose()
    await llm.aclose()


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
app.include_router(router)
mount_django(app)


@app.exception_handler(AppError)
async def app_error_handler(_: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"status": "error", "message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError):
    # Force the required error shape
    return JSONResponse(status_code=400, content={"status": "error", "message": "Invalid request body"})


@app.exception_handler(Exception)
async def unhandled_error_handler(_: Request, exc: Exception):
    logger.exception("Unhandled error", exc_info=exc)
    return JSONResponse(status_code=500, content={"status": "error", "message": "Internal server error"})


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
