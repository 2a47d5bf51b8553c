"""Single request/response round trip against the Gemini generateContent API.

One ``httpx.Client`` is opened per exchanger and reused across turns. Every
failure is logged and collapses to ``ERROR_SENTINEL``; nothing is retried.
"""
from __future__ import annotations
import logging

import httpx
from pydantic import ValidationError

from gemini_chat.common.config import ClientConfig
from gemini_chat.common.schema import (
    ErrorEnvelope,
    GenerateContentRequest,
    first_candidate_text,
)

LOGGER = logging.getLogger("gemini_chat.client.exchanger")

ERROR_SENTINEL = "Error processing the request."

class GeminiExchanger:
    """
    Sends user text to Gemini and returns the answer text.

    Args:
        api_key: Credential appended as the ``key`` query parameter.
        config: Endpoint and timeout settings.
        client: Pre-built HTTP client; built from ``config`` when omitted.
    """

    def __init__(
        self,
        api_key: str,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.config = config or ClientConfig()
        self._client = client or httpx.Client(timeout=self.config.timeout)

    def __enter__(self) -> "GeminiExchanger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    def close(self) -> None:
        self._client.close()

    def ask(self, text: str) -> str:
        try:
            payload = GenerateContentRequest.from_text(text).model_dump()
            r = self._client.post(
                self.config.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
            )
        except httpx.RequestError as e:
            LOGGER.error("HTTP request failed: %s: %s", type(e).__name__, self._redact(str(e)))
            return ERROR_SENTINEL
        except (UnicodeEncodeError, ValidationError) as e:
            # Lone surrogates from surrogateescape stdin have no UTF-8 encoding.
            LOGGER.error("Could not encode request text: %s", e)
            return ERROR_SENTINEL
        return _extract_answer(r)

    def _redact(self, msg: str) -> str:
        return msg.replace(self.api_key, "***") if self.api_key else msg

def _extract_answer(r: httpx.Response) -> str:
    """Pull the answer out of a response body, regardless of HTTP status.

    The API reports failures as non-2xx responses carrying an ``error`` body,
    so the status code itself is not inspected.
    """
    try:
        data = r.json()
    except ValueError as e:
        LOGGER.error("JSON parse error: %s. Response content: %s", e, r.text)
        return ERROR_SENTINEL

    if isinstance(data, dict):
        try:
            if "error" in data:
                err = ErrorEnvelope.model_validate(data).error
                LOGGER.error("API Error: %s (Code: %d)", err.message, err.code)
                return ERROR_SENTINEL
            if "candidates" in data:
                return first_candidate_text(data)
        except (ValidationError, KeyError, IndexError, TypeError) as e:
            LOGGER.error("General error: %s", e)
            return ERROR_SENTINEL

    LOGGER.error("Unexpected response format. Full response: %s", r.text)
    return ERROR_SENTINEL
