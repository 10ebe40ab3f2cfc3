"""
Request/response models and the inference client interface.
"""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

IMAGE_DATA_URL_PREFIX = "data:image/"


class ConversionRequest(BaseModel):
    # only the wire name is accepted, never the attribute name
    image_data_url: StrictStr = Field(alias="imageDataUrl")

    @field_validator("image_data_url")
    @classmethod
    def must_be_image_data_url(cls, value: str) -> str:
        if not value.startswith(IMAGE_DATA_URL_PREFIX):
            raise ValueError("imageDataUrl must be an image data URL")
        return value


class ConversionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sabre_text: str = Field(alias="sabreText")


class ErrorResponse(BaseModel):
    error: str


class InferenceClient(Protocol):
    """Anything that turns a prompt plus one image into model text."""

    def submit(self, prompt: str, image_data_url: str) -> str:
        ...
