"""
Application service: one caller's view of successive stock analyses.

The core use case is stateless, so overlapping searches (e.g. clicking
several suggestions quickly) are reconciled here: every search takes a new
request id and its outcome is applied only while that id is still the latest.
In-flight calls are not cancelled; their outcomes are dropped.
"""

from dataclasses import dataclass
from typing import Literal, Optional

import structlog

from src.application.use_cases.analyze_stock import AnalyzeStockUseCase
from src.domain.entities.stock_analysis import StockAnalysis
from src.domain.exceptions import AnalysisFetchError

SUGGESTIONS = ("AAPL", "GOOGL", "NVDA", "TSLA", "MSFT", "BTC-USD")

Status = Literal["idle", "loading", "success", "error"]

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LoadingState:
    status: Status = "idle"
    message: Optional[str] = None


class AnalysisSession:
    def __init__(self, use_case: AnalyzeStockUseCase) -> None:
        self._use_case = use_case
        self._latest_request_id = 0
        self._state = LoadingState()
        self._result: Optional[StockAnalysis] = None

    @property
    def state(self) -> LoadingState:
        return self._state

    @property
    def result(self) -> Optional[StockAnalysis]:
        return self._result

    @property
    def latest_request_id(self) -> int:
        return self._latest_request_id

    async def search(self, ticker: str) -> Optional[StockAnalysis]:
        """Run an analysis for *ticker* and apply it if still current.

        Returns the analysis when it was applied, ``None`` when the ticker was
        blank, the call failed, or a newer search superseded this one.
        """
        if not ticker or not ticker.strip():
            return None

        self._latest_request_id += 1
        request_id = self._latest_request_id
        self._state = LoadingState(status="loading")
        self._result = None

        try:
            analysis = await self._use_case.execute(ticker)
        except AnalysisFetchError as exc:
            if self._is_current(request_id):
                self._state = LoadingState(status="error", message=exc.message)
            return None

        if not self._is_current(request_id):
            logger.debug("stale_analysis_dropped", request_id=request_id, ticker=analysis.ticker)
            return None

        self._result = analysis
        self._state = LoadingState(status="success")
        return analysis

    def _is_current(self, request_id: int) -> bool:
        return request_id == self._latest_request_id
