"""
Product image field codec.

The backend stores a product's images in a single text column as a JSON
array of URLs. Rows written before multi-image support hold one plain URL.
"""

import json


def parse_image_urls(raw: str | None) -> list[str]:
    """
    Parse a stored image field into a list of URLs.

    - JSON array: returned as-is (non-string entries dropped)
    - Other valid JSON (number, object, quoted string): no images
    - Not JSON at all: legacy single URL
    """
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except ValueError:
        return [raw]
    if isinstance(parsed, list):
        return [url for url in parsed if isinstance(url, str)]
    return []


def serialize_image_urls(urls: list[str]) -> str:
    return json.dumps(urls)
