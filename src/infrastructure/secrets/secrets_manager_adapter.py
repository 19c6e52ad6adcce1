"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

load_into_env() runs once at startup, before the Gemini and Langfuse clients
are built, so GOOGLE_API_KEY / LANGFUSE_* are visible to Settings.from_env().
"""

import json
import os
from typing import Any, Optional

import boto3

from src.domain.ports.secret_store_port import ISecretStore
from src.infrastructure.logging.config import get_logger

logger = get_logger(__name__)


class SecretsManagerAdapter(ISecretStore):
    """Fetches and deserializes JSON secrets from AWS Secrets Manager."""

    def __init__(self, region: Optional[str] = None, _client: Any = None) -> None:
        self._client = _client or boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        response = self._client.get_secret_value(SecretId=secret_id)
        return json.loads(response["SecretString"])

    def load_into_env(self, secret_id: str) -> None:
        """Inject all key-value pairs of a JSON secret into os.environ.

        Existing variables are overwritten; values are stringified.
        """
        secrets = self.get_secret(secret_id)
        for key, value in secrets.items():
            os.environ[key] = str(value)
        logger.info("secrets_loaded", keys=sorted(secrets))
