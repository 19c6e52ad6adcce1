"""
Port (interface) for search-grounded language model providers.
Infrastructure adapters (e.g. GeminiSearchAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from src.domain.entities.model_response import RawModelResponse


class ISearchLanguageModel(ABC):
    @abstractmethod
    async def generate(
        self,
        system_instruction: str,
        prompt: str,
        run_config: Optional[dict[str, Any]] = None,
    ) -> RawModelResponse:
        """Run one search-grounded completion and return its text and citations.

        Args:
            system_instruction: Fixed instruction establishing the answer layout.
            prompt:             Per-call user prompt.
            run_config:         Framework run config (callbacks, metadata, tags).

        Raises:
            Any exception from the provider (network, auth, quota, transport).
        """
        ...
