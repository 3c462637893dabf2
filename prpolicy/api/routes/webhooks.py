"""
GitHub Webhook Routes

Receives pull_request and issue_comment webhooks and runs the policy passes.
"""

import hashlib
import hmac
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Header, HTTPException, Request
from pydantic import BaseModel, Field

from prpolicy.config import get_settings
from prpolicy.integrations.github.events import load_event
from prpolicy.policy.errors import MissingPullRequestError
from prpolicy.services.policy_runner import PolicyRunner, passes_for

logger = logging.getLogger(__name__)

router = APIRouter()


def get_runner() -> PolicyRunner:
    """Build a PolicyRunner per delivery; cached GitHub issues live for one pass."""
    return PolicyRunner()


class PassResponse(BaseModel):
    """Outcome of one policy pass."""

    status: str = Field(..., description="Pass status")
    labels_added: List[str] = Field(default_factory=list)
    labels_removed: List[str] = Field(default_factory=list)
    remediations: List[str] = Field(default_factory=list)


class WebhookResponse(BaseModel):
    """Webhook handling response."""

    event: str = Field(..., description="GitHub event name")
    action: Optional[str] = Field(None, description="GitHub event action")
    passes: Dict[str, PassResponse] = Field(default_factory=dict)
    passed: bool = Field(..., description="False when remediations are outstanding")


def verify_signature(secret: str, payload: bytes, signature: Optional[str]) -> bool:
    """Check an ``X-Hub-Signature-256`` header against the raw payload."""
    if not signature or not signature.startswith("sha256="):
        return False
    expected = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return hmac.compare_digest(f"sha256={expected}", signature)


@router.post("/webhook", response_model=WebhookResponse)
async def handle_webhook(
    request: Request,
    x_github_event: str = Header(...),
    x_hub_signature_256: Optional[str] = Header(None),
):
    """
    Handle a GitHub webhook delivery.

    pull_request events sync the checklist and validate metadata;
    edited issue_comment events sync labels from the checklist.
    """
    settings = get_settings()
    raw = await request.body()

    if settings.github_webhook_secret and not verify_signature(
        settings.github_webhook_secret, raw, x_hub_signature_256
    ):
        logger.warning(f"Rejected {x_github_event} webhook with invalid signature")
        raise HTTPException(status_code=401, detail="Invalid webhook signature")

    payload = await request.json()
    action = payload.get("action") if isinstance(payload, dict) else None

    if not passes_for(x_github_event, action):
        logger.info(f"Ignoring {x_github_event}/{action} delivery")
        return WebhookResponse(event=x_github_event, action=action, passed=True)

    try:
        event = load_event(payload, x_github_event)
    except MissingPullRequestError as e:
        logger.error(str(e))
        raise HTTPException(status_code=422, detail=str(e))

    outcome = await get_runner().dispatch(event)

    passes = {
        name: PassResponse(
            status=result.status.value,
            labels_added=result.delta.to_add,
            labels_removed=result.delta.to_remove,
            remediations=result.remediations,
        )
        for name, result in outcome.results.items()
    }

    return WebhookResponse(
        event=event.event_name,
        action=event.event_action,
        passes=passes,
        passed=outcome.exit_code == 0,
    )
