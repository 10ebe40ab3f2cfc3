# convert_main.py
"""
Command line conversion of a local flight screenshot into Sabre segment lines.

    python -m image_to_sabre.cli.convert_main booking.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from image_to_sabre.config import load_settings
from image_to_sabre.converter import ConversionError, ConversionService, InferenceClient
from image_to_sabre.converter.utils import file_to_data_url
from image_to_sabre.libs.llm_openai import OpenAIVisionClient


def run_cli(argv: Optional[List[str]] = None, client: Optional[InferenceClient] = None) -> int:
    parser = argparse.ArgumentParser(description="Convert a flight screenshot to Sabre PNR air segments.")
    parser.add_argument("image", help="path to a PNG/JPEG/WEBP screenshot")
    parser.add_argument("-v", "--verbose", action="store_true", help="log model calls to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        settings = load_settings()
    except RuntimeError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    service = ConversionService(settings, client or OpenAIVisionClient(settings))

    try:
        data_url = file_to_data_url(args.image)
    except OSError as e:
        print(f"Cannot read {args.image}: {e}", file=sys.stderr)
        return 1

    try:
        result = service.convert({"imageDataUrl": data_url})
    except ConversionError as e:
        print(f"Error ({e.status_code}): {e.message}", file=sys.stderr)
        return 1

    print(result.sabre_text)
    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
