"""
Domain entities for a parsed stock analysis and its synthetic chart series.
Zero external dependencies — pure Python dataclasses only.

Sequences are stored as tuples so a StockAnalysis cannot be mutated after
AnalyzeStockUseCase builds it.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime

from src.domain.services.numbers import parse_number


@dataclass(frozen=True)
class AnalysisRequest:
    ticker: str

    def __post_init__(self) -> None:
        if not self.ticker or not self.ticker.strip():
            raise ValueError("ticker must be a non-empty string")

    @property
    def display_ticker(self) -> str:
        return self.ticker.strip().upper()


@dataclass(frozen=True)
class ParsedFields:
    price_text: str
    change_text: str
    summary_text: str
    details_text: str

    @property
    def price_value(self) -> float:
        return parse_number(self.price_text)

    @property
    def change_value(self) -> float:
        return parse_number(self.change_text)


@dataclass(frozen=True)
class Source:
    title: str
    url: str


@dataclass(frozen=True)
class SeriesPoint:
    time_label: str
    value: float


@dataclass(frozen=True)
class StockAnalysis:
    ticker: str
    price_text: str
    change_text: str
    change_percent: float
    analysis_markdown: str
    retrieved_at: datetime
    sources: tuple[Source, ...] = field(default_factory=tuple)
    series: tuple[SeriesPoint, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """JSON-friendly rendering used by the HTTP entry point."""
        data = asdict(self)
        data["retrieved_at"] = self.retrieved_at.isoformat()
        data["sources"] = [asdict(s) for s in self.sources]
        data["series"] = [asdict(p) for p in self.series]
        return data
