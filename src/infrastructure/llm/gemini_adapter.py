"""
Infrastructure adapter: Gemini (ChatGoogleGenerativeAI + Google Search) → ISearchLanguageModel.

All langchain_google_genai details are confined here, including where the
grounding citations live in the response metadata.
"""

from typing import Any, Iterable, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from src.domain.entities.model_response import Citation, RawModelResponse
from src.domain.ports.llm_port import ISearchLanguageModel
from src.infrastructure.logging.config import get_logger

logger = get_logger(__name__)

GOOGLE_SEARCH_TOOL = {"google_search": {}}


class GeminiSearchAdapter(ISearchLanguageModel):
    """Wraps ChatGoogleGenerativeAI with Google Search grounding bound."""

    MODEL_ID = "gemini-2.5-flash"

    def __init__(
        self,
        model: Optional[str] = None,
        temperature: float = 0.2,
        api_key: Optional[str] = None,
        _runnable: Any = None,
    ) -> None:
        """
        Args:
            model:       Gemini model id; defaults to MODEL_ID.
            temperature: Sampling temperature. Kept low for factual answers.
            api_key:     Google API key; falls back to GOOGLE_API_KEY.
            _runnable:   Optional pre-configured Runnable (used by tests to
                         bypass constructing ChatGoogleGenerativeAI).
        """
        self.model = model or self.MODEL_ID
        if _runnable is not None:
            self._llm = _runnable
        else:
            kwargs: dict[str, Any] = {"model": self.model, "temperature": temperature}
            if api_key:
                kwargs["google_api_key"] = api_key
            self._llm = ChatGoogleGenerativeAI(**kwargs).bind_tools([GOOGLE_SEARCH_TOOL])

    async def generate(
        self,
        system_instruction: str,
        prompt: str,
        run_config: Optional[dict[str, Any]] = None,
    ) -> RawModelResponse:
        messages = [SystemMessage(content=system_instruction), HumanMessage(content=prompt)]
        logger.debug("gemini_request", model=self.model)
        message = await self._llm.ainvoke(messages, config=run_config)

        citations = tuple(_citations(message.response_metadata))
        logger.debug("gemini_response", model=self.model, citations=len(citations))
        return RawModelResponse(text=_text_of(message.content), citations=citations)


def _text_of(content: Any) -> str:
    """Flatten AIMessage content, which is a str or a list of content blocks."""
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def _pick(record: dict, *keys: str) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return None


def _citations(response_metadata: Optional[dict]) -> Iterable[Citation]:
    """Yield one Citation per grounding chunk, in the order Gemini returned them."""
    grounding = _pick(response_metadata or {}, "grounding_metadata", "groundingMetadata") or {}
    chunks = _pick(grounding, "grounding_chunks", "groundingChunks") or []
    for chunk in chunks:
        web = chunk.get("web") or {}
        yield Citation(title=web.get("title"), uri=web.get("uri"))
