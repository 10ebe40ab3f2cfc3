"""
Text and data-URL helpers for the conversion flow.
"""

import base64
import mimetypes
import re
from pathlib import Path

# "↵" as emitted by some models, and the same glyph after its UTF-8 bytes
# were decoded as cp1252 ("â†µ").
_BROKEN_NEWLINE_RE = re.compile(r"[ \t]*(?:â†µ|↵)[ \t]*(?:\r?\n)?")


def normalize_sabre_text(text: str) -> str:
    """Turn stray newline glyphs into real newlines, drop CRs and trim."""
    text = _BROKEN_NEWLINE_RE.sub("\n", text or "")
    text = text.replace("\r", "")
    return text.strip()


def file_to_data_url(path: str, default_mime: str = "image/png") -> str:
    """Encode a local image as a base64 data URL."""
    mime, _ = mimetypes.guess_type(path)
    if not mime or not mime.startswith("image/"):
        mime = default_mime
    payload = base64.b64encode(Path(path).read_bytes()).decode("ascii")
    return f"data:{mime};base64,{payload}"


def bytes_to_data_url(data: bytes, mime: str = "image/png") -> str:
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{payload}"
