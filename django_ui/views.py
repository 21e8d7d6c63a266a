# /django_ui/views.py
from django.shortcuts import render

from services.models import ModelChoice, PipelineRequest, PullRequestLocator

# Populated by main.py at startup
_svc = None
_credentials = None

# True while a summary is running; overlapping submissions are turned away
_busy = False

MODEL_OPTIONS = [
    (ModelChoice.FAST.value, "GPT-3.5"),
    (ModelChoice.ADVANCED.value, "GPT-4.0"),
]


def _stored_api_key() -> str:
    if _credentials is None:
        return ""
    return _credentials.get() or ""


async def index(request):
    global _busy
    context = {
        "owner": "",
        "repo": "",
        "reference": "",
        "api_key": _stored_api_key(),
        "model": ModelChoice.FAST.value,
        "models": MODEL_OPTIONS,
        "output": "",
    }

    if request.method == "POST":
        owner = request.POST.get("owner", "").strip()
        repo = request.POST.get("repo", "").strip()
        reference = request.POST.get("reference", "").strip()
        api_key = request.POST.get("api_key", "")
        model = request.POST.get("model", ModelChoice.FAST.value)
        context.update(owner=owner, repo=repo, reference=reference, api_key=api_key, model=model)

        if _credentials is not None and api_key != _stored_api_key():
            _credentials.set(api_key)

        if not (owner and repo and reference):
            context["output"] = "Please fill in the user, repository and pull request number."
        elif not api_key:
            context["output"] = "Please enter an OpenAI API key."
        elif model not in {m.value for m in ModelChoice}:
            context["output"] = f"Unknown model: {model}"
        elif _svc is None:
            context["output"] = "Summarizer service is not available."
        elif _busy:
            context["output"] = "A summary is already being processed, please wait."
        else:
            _busy = True
            try:
                result = await _svc.run(PipelineRequest(
                    locator=PullRequestLocator(owner, repo, reference),
                    api_key=api_key,
                    model=ModelChoice(model),
                ))
            finally:
                _busy = False
            context["output"] = result.output

    return render(request, "django_ui/index.html", context)
