"""Canonical JSON and base64url segment encoding."""

import binascii
import json
from typing import Any

from jwt.utils import base64url_decode, base64url_encode


def encode_segment(data: dict[str, Any]) -> str:
    """Encode a JSON object as an unpadded base64url token segment.

    Keys are sorted and separators compact so the same mapping always
    produces the same segment.

    Raises:
        TypeError: If a value is not JSON-serializable.
        ValueError: On circular references or non-finite floats.
    """
    raw = json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    return base64url_encode(raw.encode("utf-8")).decode("ascii")


def _reject_constant(name: str) -> Any:
    raise json.JSONDecodeError(f"non-finite number {name} is not allowed", name, 0)


def decode_segment(segment: str) -> dict[str, Any]:
    """Decode a base64url token segment into a JSON object.

    Padding is optional.

    Raises:
        ValueError: If the segment is not base64url, not UTF-8 JSON, or not
            a JSON object.
    """
    try:
        raw = base64url_decode(segment.encode("ascii"))
    except (UnicodeEncodeError, binascii.Error) as e:
        raise ValueError(f"segment is not valid base64url: {e}") from e

    try:
        data = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"segment is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("segment is not a JSON object")
    return data
