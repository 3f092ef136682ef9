"""JSON codec for the per-option video link column."""
import json
import logging
from collections.abc import Mapping

from videolink.errors import DecodeFailure, UnexpectedValueShape

logger = logging.getLogger(__name__)


def normalize_option_id(key):
    """Option ids are integers in the catalog; JSON object keys are text.

    Only canonical ASCII integers convert, so "01" or non-ASCII digits stay
    text and cannot collide with an existing key.
    """
    if (
        isinstance(key, str)
        and key.isascii()
        and key.isdigit()
        and (key == "0" or not key.startswith("0"))
    ):
        return int(key)
    return key


class VideoLinkSerializer:
    """Converts between the stored column text and an option id -> link dict.

    Decoding never raises. Malformed or legacy values decode to an empty
    mapping and are logged so a corrupted row can be traced.
    """

    def decode(self, raw):
        if isinstance(raw, Mapping):
            return raw
        try:
            return self._parse(raw)
        except DecodeFailure as e:
            logger.warning("Discarding undecodable video link value: %s", e)
            return {}

    def encode(self, mapping):
        if not isinstance(mapping, Mapping):
            # Already-encoded text or legacy data: don't double-encode
            return mapping
        data = {str(k): v for k, v in mapping.items()}
        return json.dumps(data, sort_keys=True, separators=(",", ":"))

    def _parse(self, raw):
        if raw is None:
            return {}
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeFailure(f"not UTF-8 text ({e})") from e
        if not isinstance(raw, str):
            raise UnexpectedValueShape(f"unsupported type {type(raw).__name__}")
        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DecodeFailure(f"invalid JSON ({e.msg})") from e

        if not isinstance(data, dict):
            raise DecodeFailure(f"expected a JSON object, got {type(data).__name__}")

        return {
            normalize_option_id(k): v if isinstance(v, str) else str(v)
            for k, v in data.items()
            if v is not None
        }
