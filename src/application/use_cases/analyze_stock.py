"""
Use-case: turn one search-grounded model answer into a StockAnalysis.
Depends only on Domain ports, entities and services — no infrastructure imports.

Only the outbound model call can fail hard; everything after it degrades
field by field to documented defaults.
"""

import math
import random
from datetime import datetime, timezone
from typing import Callable, Optional

import structlog

from src.application.agent.prompts import (
    SYSTEM_INSTRUCTION,
    build_user_prompt,
    compose_analysis_markdown,
)
from src.domain.entities.model_response import RawModelResponse
from src.domain.entities.stock_analysis import AnalysisRequest, StockAnalysis
from src.domain.exceptions import AnalysisFetchError
from src.domain.ports.llm_port import ISearchLanguageModel
from src.domain.ports.observability_port import IObservabilityHandler
from src.domain.services.field_extractor import extract_fields, missing_labels
from src.domain.services.source_filter import filter_sources
from src.domain.services.synthetic_series import generate_series

logger = structlog.get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnalyzeStockUseCase:
    def __init__(
        self,
        model: ISearchLanguageModel,
        observability: Optional[IObservabilityHandler] = None,
        rng_factory: Callable[[], random.Random] = random.Random,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Args:
            model:         ISearchLanguageModel implementation (e.g. Gemini adapter).
            observability: Optional IObservabilityHandler whose callback is
                           attached to the model run.
            rng_factory:   Builds the noise source for each synthetic series.
            clock:         Returns the timestamp stamped on each result.
        """
        self._model = model
        self._observability = observability
        self._rng_factory = rng_factory
        self._clock = clock

    async def execute(self, ticker: str) -> StockAnalysis:
        """Analyze *ticker* (case-insensitive).

        Raises:
            ValueError:         if *ticker* is blank.
            AnalysisFetchError: if the model call itself fails.
        """
        request = AnalysisRequest(ticker)
        try:
            response = await self._model.generate(
                SYSTEM_INSTRUCTION,
                build_user_prompt(request.ticker),
                run_config=self._run_config(request),
            )
        except Exception as exc:
            raise AnalysisFetchError() from exc

        return self._compose(request, response)

    def _run_config(self, request: AnalysisRequest) -> dict:
        config: dict = {
            "metadata": {"ticker": request.display_ticker},
            "tags": ["stock-insight"],
        }
        if self._observability is not None:
            config["callbacks"] = [self._observability.as_callback()]
        return config

    def _compose(self, request: AnalysisRequest, response: RawModelResponse) -> StockAnalysis:
        fields = extract_fields(response.text)

        missing = missing_labels(response.text)
        if missing:
            logger.warning(
                "response_contract_deviation",
                ticker=request.display_ticker,
                missing_labels=missing,
            )

        change_value = fields.change_value
        change_percent = change_value if math.isfinite(change_value) else 0.0

        return StockAnalysis(
            ticker=request.display_ticker,
            price_text=fields.price_text,
            change_text=fields.change_text,
            change_percent=change_percent,
            analysis_markdown=compose_analysis_markdown(
                fields.summary_text, fields.details_text
            ),
            sources=filter_sources(response.citations),
            retrieved_at=self._clock(),
            series=generate_series(
                fields.price_value, change_percent, rng=self._rng_factory()
            ),
        )
