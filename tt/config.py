"""Configuration values for tt.

Persisted settings live in ~/.tt/config.yaml (see tt.global_config).
This module holds the defaults, the settings schema, and the per-run
CommitOptions value that the CLI builds from its flags.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, field_validator


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# Used when ~/.tt/config.yaml doesn't set them

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "openai/gpt-4o-mini"

# Environment variable consulted when no api_key is stored
API_KEY_ENV_VAR = "TT_API_KEY"

# Keys that `tt config set` may change (api_key goes through key-set)
SETTABLE_KEYS = ("base_url", "default_model")

# Identifying headers attached to every language-model request
APP_HEADERS = {
    "HTTP-Referer": "https://github.com/aixoio/tt",
    "X-Title": "tt",
}


class Settings(BaseModel):
    """Persisted tt settings."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    default_model: str = DEFAULT_MODEL

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_api_key(cls, v: Optional[str]) -> str:
        """Treat a null key as empty and drop surrounding whitespace."""
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator("base_url", "default_model")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Ensure URL and model are not blank."""
        if not v or not v.strip():
            raise ValueError("value cannot be empty")
        return v.strip()

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class CommitOptions:
    """Options for a single AI commit run.

    Attributes:
        auto_commit: Commit the first generated message without asking.
        add_first: Stage all changes before committing.
        push_after: Push once the commit has been created.
        model_override: Model to use instead of the configured default.
    """

    auto_commit: bool = False
    add_first: bool = True
    push_after: bool = False
    model_override: Optional[str] = None

    def resolve_model(self, settings: Settings) -> str:
        """Return the model this run should use."""
        return self.model_override or settings.default_model
