"""
Screenshot → Sabre conversion: validate, prompt the vision model, normalize.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from image_to_sabre.config import Settings

from .errors import InvalidInput, PayloadTooLarge, error_from_exception
from .prompt import SABRE_PROMPT
from .types import ConversionRequest, ConversionResponse, InferenceClient
from .utils import normalize_sabre_text

log = logging.getLogger(__name__)


class ConversionService:
    def __init__(self, settings: Settings, client: InferenceClient, prompt: str = SABRE_PROMPT):
        self.settings = settings
        self.client = client
        self.prompt = prompt

    def validate(self, payload: Any) -> ConversionRequest:
        """Check the request body; raise before any model call is made."""
        if not isinstance(payload, dict):
            log.warning("Rejected request: body is %s, not an object", type(payload).__name__)
            raise InvalidInput()
        try:
            request = ConversionRequest.model_validate(payload)
        except ValidationError:
            log.warning("Rejected request: invalid or missing imageDataUrl")
            raise InvalidInput() from None

        size = len(request.image_data_url)
        if size > self.settings.max_image_chars:
            log.warning("Rejected request: imageDataUrl has %d chars (limit %d)", size, self.settings.max_image_chars)
            raise PayloadTooLarge()
        return request

    def convert(self, payload: Any) -> ConversionResponse:
        request = self.validate(payload)
        try:
            raw = self.client.submit(self.prompt, request.image_data_url)
        except Exception as e:
            err = error_from_exception(e)
            log.exception("Image conversion error: status=%d message=%s", err.status_code, err.message)
            raise err from e
        return ConversionResponse(sabreText=normalize_sabre_text(raw))
