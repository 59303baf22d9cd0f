"""
Request normalization: raw HTTP envelope in, validated input text out.

Every check here is a pure function of the envelope; failures raise the
matching PipelineError subclass and nothing else is touched.
"""

import base64
import binascii
import json
from typing import Any, Dict

from .types import RequestEnvelope, NormalizedInput, trim
from .errors import MethodNotAllowed, PayloadTooLarge, InvalidJSONBody, MissingField, InputTooLong

MAX_BODY_BYTES = 64 * 1024
MAX_INPUT_CHARS = 8000


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def loads_strict(text: str) -> Any:
    """json.loads without the NaN/Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)


def check_method(method: str) -> bool:
    """Return True for a CORS preflight, False for POST; reject anything else."""
    method = (method or "").upper()
    if method == "OPTIONS":
        return True
    if method != "POST":
        raise MethodNotAllowed("Method not allowed. Use POST.")
    return False


def _body_bytes(body) -> bytes:
    if isinstance(body, bytes):
        return body
    return (body or "").encode("utf-8")


def _decode_body(envelope: RequestEnvelope) -> str:
    raw = _body_bytes(envelope.body)
    try:
        if envelope.is_base64_encoded:
            raw = base64.b64decode(raw)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError) as e:
        # UnicodeDecodeError is a ValueError
        raise InvalidJSONBody("Invalid JSON body.", details=str(e)) from e


def _parse_payload(body_text: str) -> Dict[str, Any]:
    try:
        payload = loads_strict(body_text or "{}")
    except ValueError as e:
        raise InvalidJSONBody("Invalid JSON body.", details=str(e)) from e
    return payload if isinstance(payload, dict) else {}


def normalize_request(envelope: RequestEnvelope, field_name: str) -> NormalizedInput:
    if len(_body_bytes(envelope.body)) > MAX_BODY_BYTES:
        raise PayloadTooLarge("Request body too large.")

    payload = _parse_payload(_decode_body(envelope))

    value = payload.get(field_name)
    text = value if isinstance(value, str) else ""
    if not trim(text):
        raise MissingField(f"Missing required field: {field_name}")
    if len(text) > MAX_INPUT_CHARS:
        raise InputTooLong(f"Input is too long. Please keep it under {MAX_INPUT_CHARS} characters.")

    return NormalizedInput(text=text)
