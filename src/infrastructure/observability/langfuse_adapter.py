"""
Infrastructure adapter: Langfuse → IObservabilityHandler.

Langfuse is imported lazily inside the methods so the module can be loaded
even when LANGFUSE_* environment variables are not yet set (e.g. during testing).
Secrets loaded by SecretsManagerAdapter.load_into_env() must be in place
before this adapter is constructed.
"""

from typing import Any

from src.domain.ports.observability_port import IObservabilityHandler


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Wraps the Langfuse LangChain CallbackHandler for Gemini analysis runs."""

    def __init__(self) -> None:
        from langfuse.langchain import CallbackHandler
        self._handler = CallbackHandler()

    def as_callback(self) -> Any:
        """Return the Langfuse CallbackHandler for LangChain run configs."""
        return self._handler

    def flush(self) -> None:
        """Flush pending traces to the Langfuse backend before the process exits."""
        from langfuse import get_client
        get_client().flush()
