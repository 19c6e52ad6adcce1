"""Pytest configuration and shared fixtures."""

import random

import pytest

from src.application.use_cases.analyze_stock import AnalyzeStockUseCase
from src.domain.entities.model_response import Citation, RawModelResponse
from src.domain.ports.llm_port import ISearchLanguageModel
from tests.fakes import FIXED_NOW, WELL_FORMED_TEXT, FakeSearchModel


@pytest.fixture
def fake_model() -> FakeSearchModel:
    """Well-formed answer with one usable and one link-less citation."""
    return FakeSearchModel(
        RawModelResponse(
            text=WELL_FORMED_TEXT,
            citations=(
                Citation(title="Reuters", uri="https://reuters.com/aapl"),
                Citation(title="Broken", uri=None),
            ),
        )
    )


@pytest.fixture
def make_use_case():
    """Factory for a use case with a seeded noise source and a frozen clock."""

    def _make(model: ISearchLanguageModel, **kwargs) -> AnalyzeStockUseCase:
        kwargs.setdefault("rng_factory", lambda: random.Random(42))
        kwargs.setdefault("clock", lambda: FIXED_NOW)
        return AnalyzeStockUseCase(model, **kwargs)

    return _make
