"""
Parser for the four-field text contract the analyst prompt asks for:

    PRICE: 150.25
    CHANGE: +1.50%
    ANALYSIS: <short summary>
    DETAILS: <markdown bullets, running to end of text>

This is the only module that knows the layout. Each field is matched on its
own, so a missing label never blocks the others; every field has a default.
"""

import re

from src.domain.entities.stock_analysis import ParsedFields

PRICE_FALLBACK = "N/A"
CHANGE_FALLBACK = "0.00%"
ANALYSIS_FALLBACK = "Analysis not available."

_PRICE = re.compile(r"PRICE:\s*([0-9.,]+)", re.IGNORECASE)
_CHANGE = re.compile(r"CHANGE:\s*([+\-]?\d+\.?\d*%?)", re.IGNORECASE)
_ANALYSIS = re.compile(r"ANALYSIS:\s*(.*?)(?=DETAILS:|\Z)", re.IGNORECASE | re.DOTALL)
_DETAILS = re.compile(r"DETAILS:\s*(.*)", re.IGNORECASE | re.DOTALL)

_LABELS = ("PRICE", "CHANGE", "ANALYSIS", "DETAILS")


def extract_fields(text: str) -> ParsedFields:
    price = _PRICE.search(text)
    change = _CHANGE.search(text)
    analysis = _ANALYSIS.search(text)
    details = _DETAILS.search(text)

    return ParsedFields(
        price_text=price.group(1) if price else PRICE_FALLBACK,
        change_text=change.group(1) if change else CHANGE_FALLBACK,
        summary_text=analysis.group(1).strip() if analysis else ANALYSIS_FALLBACK,
        details_text=details.group(1).strip() if details else "",
    )


def missing_labels(text: str) -> list[str]:
    """Labels of the contract that do not appear in *text* at all."""
    upper = text.upper()
    return [label for label in _LABELS if f"{label}:" not in upper]
