"""
Structural validation of model output.

This runs independently of the schema sent to the provider, so output from a
provider that ignores strict mode is still caught. Checks short-circuit on the
first failure and report a single message.
"""

import re
from typing import Any, Dict, Optional, Sequence

from .types import FieldRule, trim
from .normalizer import loads_strict
from .errors import NonJSONOutput, InvalidResponseShape


def _matches(regex: "re.Pattern[str]", item: str) -> bool:
    # The pattern must cover the whole item; `$` alone would also accept a
    # trailing newline.
    match = regex.match(item)
    return match is not None and match.end() == len(item)


def _check_string(obj: Dict[str, Any], rule: FieldRule) -> Optional[str]:
    value = obj[rule.name]
    if not isinstance(value, str) or len(trim(value)) < rule.min_length:
        return f"{rule.name} must be a string (minLength {rule.min_length})."
    return None


def _check_array(obj: Dict[str, Any], rule: FieldRule) -> Optional[str]:
    items = obj[rule.name]
    if not isinstance(items, list):
        return f"{rule.name} must be an array."
    if len(items) < rule.min_items or len(items) > rule.max_items:
        return f"{rule.name} must have {rule.min_items}-{rule.max_items} items."

    regex = rule.regex
    for item in items:
        if not isinstance(item, str) or len(trim(item)) < rule.min_length:
            return f"{rule.name} items must be strings (minLength {rule.min_length})."
        if regex is not None and not _matches(regex, item):
            return f"{rule.name} items must match required pattern."
    return None


def validate_plan_shape(obj: Any, rules: Sequence[FieldRule]) -> Optional[str]:
    """Return the first shape violation in `obj`, or None when it conforms."""
    if not isinstance(obj, dict):
        return "Response is not an object."

    allowed = [rule.name for rule in rules]
    for key in obj:
        if key not in allowed:
            return f"Unexpected property: {key}"
    for key in allowed:
        if key not in obj:
            return f"Missing required property: {key}"

    # strings before arrays, each in table order
    for rule in rules:
        if not rule.is_array:
            error = _check_string(obj, rule)
            if error:
                return error
    for rule in rules:
        if rule.is_array:
            error = _check_array(obj, rule)
            if error:
                return error
    return None


def parse_model_output(text: str) -> Any:
    try:
        return loads_strict(text)
    except ValueError as e:
        raise NonJSONOutput("Model returned non-JSON output.", details=str(e), model_output=text) from e


def validate_model_output(text: str, rules: Sequence[FieldRule]) -> Dict[str, Any]:
    """Parse and structurally check model text; returns the object unchanged."""
    parsed = parse_model_output(text)
    shape_error = validate_plan_shape(parsed, rules)
    if shape_error:
        raise InvalidResponseShape(
            f"Model returned an invalid response shape: {shape_error}",
            details=shape_error,
            model_output=text,
        )
    return parsed
