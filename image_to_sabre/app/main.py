"""
ASGI entry point: `uvicorn image_to_sabre.app.main:app`.
"""

import logging

from image_to_sabre.app.api import create_app
from image_to_sabre.config import load_settings

settings = load_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)

app = create_app(settings)
