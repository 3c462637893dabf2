from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from functools import lru_cache
import logging
import re


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "PR Policy Bot"
    debug: bool = False

    # GitHub
    github_token: str = ""
    github_repo_owner: str = ""
    github_repo_name: str = ""
    github_webhook_secret: str = ""  # Empty disables signature verification

    # Identity the bot writes labels and comments as
    bot_login: str = "github-actions[bot]"

    # Regex a regression-fix PR link must match. Derived from the repo owner when empty.
    pr_url_pattern: str = ""

    # GitHub Actions runner context (GITHUB_EVENT_PATH, GITHUB_EVENT_NAME, GITHUB_ACTOR)
    github_event_path: str = ""
    github_event_name: str = ""
    github_actor: str = ""

    model_config = ConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def github_repository(self) -> str:
        return f"{self.github_repo_owner}/{self.github_repo_name}"

    @property
    def pull_request_url_pattern(self) -> str:
        if self.pr_url_pattern:
            return self.pr_url_pattern
        owner = re.escape(self.github_repo_owner) if self.github_repo_owner else r"[^/\s]+"
        return rf"https://github\.com/{owner}/[^/\s]+/pull/[0-9]+"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for an entry point (web app or CLI)."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
