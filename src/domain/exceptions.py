"""Domain exceptions."""

FETCH_FAILED_MESSAGE = "Failed to fetch stock data. Please try again."


class AnalysisFetchError(Exception):
    """The outbound call to the generative-search service failed.

    Carries a fixed, user-facing message; the underlying error is chained as
    ``__cause__``.
    """

    def __init__(self, message: str = FETCH_FAILED_MESSAGE) -> None:
        super().__init__(message)
        self.message = message
