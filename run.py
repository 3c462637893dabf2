"""
Run the webhook service with uvicorn.

Usage:
    python run.py

HOST and PORT default to 127.0.0.1:8000. DEBUG=true switches to debug logging.
"""

import os

import uvicorn
from prpolicy.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    if not settings.github_webhook_secret:
        print("Warning: GITHUB_WEBHOOK_SECRET not set, webhook signatures are not verified")

    uvicorn.run(
        "prpolicy.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_level="debug" if settings.debug else "info",
    )
