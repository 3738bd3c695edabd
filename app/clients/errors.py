class APIClientError(Exception):
    """Base error for failures talking to an external API."""
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

class FetchError(APIClientError):
    """The species API could not be reached or returned an unreadable body."""

class TranslationError(APIClientError):
    """The translation API could not be reached or returned an unreadable body."""
