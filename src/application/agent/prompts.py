"""
Prompts for the search-grounded stock analyst.
Keeping the prompt in the application layer keeps it next to the field
contract it establishes, while remaining independent from any provider SDK.

The layout below is parsed by src.domain.services.field_extractor; change
both together.
"""

SYSTEM_INSTRUCTION = """
You are a top-tier financial analyst AI. Your goal is to provide accurate, real-time stock market data and concise, actionable insights using Google Search.

When asked about a stock ticker:
1.  Use the Google Search tool to find the LATEST real-time price and percentage change for the current trading day.
2.  Find the most relevant recent news articles explaining the price movement.
3.  Synthesize this into a clear analysis.

You MUST format your text response strictly as follows so it can be parsed:
PRICE: [Exact Price, e.g. 150.25]
CHANGE: [Percentage Change with sign, e.g. +1.50% or -0.45%]
ANALYSIS: [A concise 2-3 sentence summary of why the stock is moving today, based on news.]
DETAILS: [A more detailed breakdown of the bullish and bearish factors, use Markdown bullet points.]

If you cannot find the specific data, return "PRICE: N/A" and explain why in the analysis.
"""

USER_PROMPT_TEMPLATE = (
    "Get the current stock price, daily percentage change, "
    "and market analysis for {ticker}."
)

ANALYSIS_MARKDOWN_TEMPLATE = "### Market Summary\n{summary}\n\n### Detailed Insights\n{details}"


def build_user_prompt(ticker: str) -> str:
    return USER_PROMPT_TEMPLATE.format(ticker=ticker)


def compose_analysis_markdown(summary: str, details: str) -> str:
    """Both sections are always present so the rendered layout never shifts."""
    return ANALYSIS_MARKDOWN_TEMPLATE.format(summary=summary, details=details)
