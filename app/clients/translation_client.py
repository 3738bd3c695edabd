import os
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from app.clients.errors import TranslationError
from app.models import TranslationPayload

logger = logging.getLogger(__name__)

class TranslationClient:
    BASE_URL = "https://api.funtranslations.com/translate/shakespeare.json"

    def __init__(self, base_url: Optional[str] = None):
        if base_url is None:
            base_url = os.getenv("TRANSLATION_API_URL", self.BASE_URL)
        self.base_url = base_url
        self.client = httpx.AsyncClient()

    async def translate(self, text: str) -> str:
        """Translates text into Shakespearean English."""
        logger.info(f"Translating: {text[:30]}...")

        try:
            response = await self.client.post(url=self.base_url, json={"text": text})
        except httpx.RequestError as e:
            logger.error(f"Translation API network error: {str(e)}")
            raise TranslationError(f"Translation API network error: {str(e)}") from e

        # The status code is not checked: a body with translated contents is trusted as-is.
        # Error replies (e.g. 429 rate limit) carry no contents and fail parsing below.
        try:
            payload = TranslationPayload.model_validate_json(response.content)
        except ValidationError as e:
            detail = f"Translation API returned an unexpected response format (status {response.status_code})."
            if response.status_code == 429:
                detail += " Rate limit exceeded."
            logger.error(f"Translation API error: {detail}")
            raise TranslationError(detail) from e

        return payload.contents.translated

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
