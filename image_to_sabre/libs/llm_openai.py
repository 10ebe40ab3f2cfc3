# llm_openai.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, List, Union

from openai import OpenAI

from image_to_sabre.config import Settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlattenedText:
    text: str


@dataclass(frozen=True)
class StructuredOutput:
    fragments: List[str]  # one entry per output item


@dataclass(frozen=True)
class EmptyOutput:
    pass


ResponseShape = Union[FlattenedText, StructuredOutput, EmptyOutput]


def _get(obj: Any, name: str) -> Any:
    # SDK objects expose attributes, raw JSON payloads are dicts
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def classify_response(resp: Any) -> ResponseShape:
    """Map a Responses API payload onto the shape it actually carries."""
    output_text = _get(resp, "output_text")
    if isinstance(output_text, str) and output_text:
        return FlattenedText(output_text)

    fragments = []
    for item in _get(resp, "output") or []:
        parts = _get(item, "content") or []
        fragments.append("".join(_get(part, "text") or "" for part in parts))
    if any(fragments):
        return StructuredOutput(fragments)

    return EmptyOutput()


def extract_output_text(resp: Any) -> str:
    shape = classify_response(resp)
    if isinstance(shape, FlattenedText):
        return shape.text
    if isinstance(shape, StructuredOutput):
        return "\n".join(shape.fragments)
    return ""


class OpenAIVisionClient:
    """Submits one prompt + image turn to the Responses API."""

    def __init__(self, settings: Settings, client: OpenAI | None = None):
        self.model = settings.model
        self.temperature = settings.temperature
        self.client = client or OpenAI(api_key=settings.openai_api_key, max_retries=0)

    def submit(self, prompt: str, image_data_url: str) -> str:
        t0 = time.time()
        log.info("OpenAI call:start model=%s image_chars=%d", self.model, len(image_data_url))
        resp = self.client.responses.create(
            model=self.model,
            temperature=self.temperature,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": prompt},
                        {"type": "input_image", "image_url": image_data_url},
                    ],
                }
            ],
        )
        text = extract_output_text(resp)
        log.info(
            "OpenAI call:done model=%s ms=%d out_len=%d",
            self.model, int((time.time() - t0) * 1000), len(text),
        )
        return text
