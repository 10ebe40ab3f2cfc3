"""
HTTP client used by the Streamlit operator UI.
"""

from typing import Tuple

import requests


def call_api(api_url: str, image_data_url: str, timeout: int = 60) -> Tuple[bool, str]:
    """POST a screenshot to the API.

    Returns ``(True, sabre_text)`` on success and ``(False, error_message)``
    when the API answers with an error body.
    """
    r = requests.post(api_url, json={"imageDataUrl": image_data_url}, timeout=timeout)
    try:
        data = r.json()
    except ValueError:
        r.raise_for_status()
        raise
    if r.ok:
        return True, data.get("sabreText", "")
    return False, data.get("error") or f"HTTP {r.status_code}"
