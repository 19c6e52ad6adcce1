"""
FastAPI entry point — HTTP surface for stock analyses.

This module is the Composition Root: it wires the infrastructure adapters
into AnalyzeStockUseCase. Wiring is lazy (first request) so the app can be
imported, and its dependencies overridden, without credentials.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

load_dotenv()

from src.application.services.analysis_session import SUGGESTIONS
from src.application.use_cases.analyze_stock import AnalyzeStockUseCase
from src.domain.exceptions import AnalysisFetchError
from src.domain.ports.observability_port import IObservabilityHandler
from src.infrastructure.config.settings import Settings
from src.infrastructure.llm.gemini_adapter import GeminiSearchAdapter
from src.infrastructure.logging.config import configure_logging, get_logger
from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter

_startup_settings = Settings.from_env()
configure_logging(_startup_settings.log_level, _startup_settings.log_json)
logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Composition Root — wired once, on first use
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings after optional secret bootstrap from AWS Secrets Manager."""
    if _startup_settings.google_api_key_secret_arn:
        SecretsManagerAdapter(region=_startup_settings.aws_region).load_into_env(
            _startup_settings.google_api_key_secret_arn
        )
        return Settings.from_env()
    return _startup_settings


@lru_cache(maxsize=1)
def get_observability() -> Optional[IObservabilityHandler]:
    if not get_settings().langfuse_enabled:
        return None
    from src.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler
    return LangfuseObservabilityHandler()


@lru_cache(maxsize=1)
def get_analyze_use_case() -> AnalyzeStockUseCase:
    settings = get_settings()
    model = GeminiSearchAdapter(
        model=settings.gemini_model,
        temperature=settings.gemini_temperature,
        api_key=settings.google_api_key,
    )
    logger.info("analyzer_ready", model=model.model, tracing=settings.langfuse_enabled)
    return AnalyzeStockUseCase(model, observability=get_observability())


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    if get_observability.cache_info().currsize:
        handler = get_observability()
        if handler is not None:
            handler.flush()


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(title="Stock Insight API", lifespan=lifespan)


class AnalyzeRequest(BaseModel):
    ticker: str


@app.post("/analyze")
async def analyze(
    body: AnalyzeRequest,
    use_case: AnalyzeStockUseCase = Depends(get_analyze_use_case),
):
    """Return the parsed snapshot, sources and synthetic series for a ticker."""
    try:
        analysis = await use_case.execute(body.ticker)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except AnalysisFetchError as exc:
        logger.error("analysis_fetch_failed", ticker=body.ticker, exc_info=exc.__cause__)
        raise HTTPException(status_code=502, detail=exc.message) from exc
    return analysis.to_dict()


@app.get("/suggestions")
async def suggestions():
    return {"suggestions": list(SUGGESTIONS)}


@app.get("/health")
async def health():
    return {"status": "ok"}
