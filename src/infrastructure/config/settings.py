"""
Runtime configuration read from environment variables.

Safe defaults first, overridden by the environment (or a .env file loaded by
the entry point). Secrets are referenced, never hardcoded.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    google_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.2
    google_api_key_secret_arn: Optional[str] = None
    aws_region: str = "us-east-1"
    langfuse_public_key: Optional[str] = None
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def langfuse_enabled(self) -> bool:
        return bool(self.langfuse_public_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            google_api_key=env.get("GOOGLE_API_KEY") or None,
            gemini_model=env.get("GEMINI_MODEL", cls.gemini_model),
            gemini_temperature=float(env.get("GEMINI_TEMPERATURE", cls.gemini_temperature)),
            google_api_key_secret_arn=env.get("GOOGLE_API_KEY_SECRET_ARN") or None,
            aws_region=env.get("AWS_DEFAULT_REGION", cls.aws_region),
            langfuse_public_key=env.get("LANGFUSE_PUBLIC_KEY") or None,
            log_level=env.get("LOG_LEVEL", cls.log_level),
            log_json=env.get("LOG_JSON", "").strip().lower() in _TRUTHY,
        )
