from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

from image_to_sabre.config import Settings
from image_to_sabre.libs.llm_openai import (
    EmptyOutput,
    FlattenedText,
    OpenAIVisionClient,
    StructuredOutput,
    classify_response,
    extract_output_text,
)


def test_flattened_output_text_wins():
    resp = SimpleNamespace(
        output_text="1  AA  100  Y  01JAN  JFK LAX  0800 1100",
        output=[SimpleNamespace(content=[SimpleNamespace(text="ignored")])],
    )
    assert classify_response(resp) == FlattenedText("1  AA  100  Y  01JAN  JFK LAX  0800 1100")
    assert extract_output_text(resp) == "1  AA  100  Y  01JAN  JFK LAX  0800 1100"


def test_structured_output_joins_items_with_newlines():
    resp = {
        "output_text": "",
        "output": [
            {"content": [{"text": "1  AA  100  Y  01JAN  JFK ORD"}, {"text": "  0800 1000"}]},
            {"content": [{"type": "refusal"}, {"text": "2  AA  200  Y  01JAN  ORD LAX  1100 1300"}]},
        ],
    }
    assert isinstance(classify_response(resp), StructuredOutput)
    assert extract_output_text(resp) == (
        "1  AA  100  Y  01JAN  JFK ORD  0800 1000\n2  AA  200  Y  01JAN  ORD LAX  1100 1300"
    )


def test_neither_shape_gives_empty_string():
    for resp in ({}, SimpleNamespace(), {"output": []}, {"output": [{"content": None}]}):
        assert classify_response(resp) == EmptyOutput()
        assert extract_output_text(resp) == ""


def test_submit_sends_prompt_and_image_deterministically():
    sdk = MagicMock()
    sdk.responses.create.return_value = SimpleNamespace(output_text="1  AA  100  Y  01JAN  JFK LAX  0800 1100")
    client = OpenAIVisionClient(Settings(openai_api_key="sk-test"), client=sdk)

    out = client.submit("PROMPT", "data:image/png;base64,AAAA")

    assert out == "1  AA  100  Y  01JAN  JFK LAX  0800 1100"
    kwargs = sdk.responses.create.call_args.kwargs
    assert kwargs["model"] == "gpt-4.1-mini"
    assert kwargs["temperature"] == 0
    assert kwargs["input"] == [
        {
            "role": "user",
            "content": [
                {"type": "input_text", "text": "PROMPT"},
                {"type": "input_image", "image_url": "data:image/png;base64,AAAA"},
            ],
        }
    ]
