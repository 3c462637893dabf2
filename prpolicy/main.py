"""
Webhook service exposing the PR policy passes over HTTP.
"""

from fastapi import FastAPI
from prpolicy.config import configure_logging, get_settings
from prpolicy.api.routes import webhooks

settings = get_settings()
configure_logging(settings.debug)

app = FastAPI(
    title=settings.app_name,
    description="PR checklist, label and metadata policy bot",
    version="0.1.0",
)

app.include_router(webhooks.router, prefix="/api/github", tags=["GitHub"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": settings.app_name}
