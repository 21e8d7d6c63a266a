# /api/summarize.py
# This module defines the API endpoint for summarizing a merged pull request into changelog lines.
from fastapi import APIRouter
from api.schemas import SummarizeRequest, SummarizeResponse
from services.credential_store import CredentialStore
from services.models import PipelineRequest, PullRequestLocator
from services.summarize_service import SummarizeService
from settings import settings
from utils.errors import bad_request

router = APIRouter()


def get_service() -> SummarizeService:
    # injected in main.py via app.state; this is replaced at runtime
    raise RuntimeError("Service not initialized")


def get_credentials() -> CredentialStore:
    # replaced at runtime, like get_service
    raise RuntimeError("Credential store not initialized")


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize_pull_request(payload: SummarizeRequest):
    svc: SummarizeService = get_service()  # patched in main.py
    owner, repo, reference = payload.owner.strip(), payload.repo.strip(), payload.reference.strip()
    if not (owner and repo and reference):
        raise bad_request("owner, repo and reference must not be blank")
    api_key = payload.api_key or get_credentials().get() or settings.openai_api_key
    if not api_key:
        raise bad_request("An OpenAI API key is required")

    result = await svc.run(PipelineRequest(
        locator=PullRequestLocator(owner, repo, reference),
        api_key=api_key,
        model=payload.model,
    ))
    return SummarizeResponse(status="ok" if result.ok else "error", output=result.output)
