"""
Detail-Response Decoder

Decodes the schema-constrained JSON reply of the detail prompt into an
AttractionDetail. Decoding is strict: no code-fence stripping, no repair of
malformed JSON. Anything that isn't a JSON object with description, traffic
and reviews raises DetailDecodeError carrying the raw text.
"""

import json
import logging

from pydantic import ValidationError

from attraction_finder.errors import DetailDecodeError
from attraction_finder.schemas.attractions import AttractionDetail

logger = logging.getLogger(__name__)


def decode_attraction_detail(raw_text: str) -> AttractionDetail:
    """
    Decode a detail reply.

    Args:
        raw_text: Reply text from Gemini, expected to be a JSON object

    Returns:
        AttractionDetail with reviews in reply order (may be empty)

    Raises:
        DetailDecodeError: On invalid JSON or a schema violation
            (missing field, wrong type, not an object)
    """
    text = (raw_text or "").strip()

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Detail reply is not valid JSON: {e}")
        logger.debug(f"Raw detail reply: {text[:500]}")
        raise DetailDecodeError(raw_text=raw_text, reason=f"invalid JSON: {e.msg}") from e

    try:
        return AttractionDetail.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) or "<root>"
            for err in e.errors()
        )
        logger.error(f"Detail reply does not match schema: {fields}")
        logger.debug(f"Raw detail reply: {text[:500]}")
        raise DetailDecodeError(raw_text=raw_text, reason=f"schema violation: {fields}") from e
