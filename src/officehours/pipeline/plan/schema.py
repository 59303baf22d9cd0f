"""
Result field constraints and the JSON schema sent to the provider.

The same rule table drives both the outbound schema and the in-process
validator, so the two cannot drift apart.
"""

from typing import Dict, Any, Tuple

from .types import FieldRule

GENERIC_NEXT_STEP_PATTERN = r"^(?:\s*(?:\d+[\.\)\:\-]\s*|[-•]\s*))?[A-Z][a-zA-Z]+\b.*$"

ACTION_VERBS = (
    "Gather", "Define", "Identify", "Review", "Assess", "Analyze", "Map", "Document",
    "Implement", "Automate", "Configure", "Create", "Set", "Establish", "Build",
    "Prototype", "Pilot", "Test", "Deploy", "Monitor", "Measure", "Train",
    "Communicate", "Schedule", "Prioritize", "Standardize", "Integrate", "Refine",
    "Update", "Validate", "Draft", "Run", "Enable", "Collect", "Clean", "Design",
    "Plan", "Decide", "Align",
)
ACTION_VERB_NEXT_STEP_PATTERN = r"^(" + "|".join(ACTION_VERBS) + r")\b.*$"

RESULT_FIELDS: Tuple[FieldRule, ...] = (
    FieldRule("problem_statement", min_length=10),
    FieldRule("clarifying_questions", min_length=5, min_items=3, max_items=5),
    FieldRule("proposed_approach", min_length=5, min_items=4, max_items=7),
    FieldRule("recommended_tools", min_length=2, min_items=1, max_items=10),
    FieldRule("risks_and_privacy", min_length=5, min_items=1, max_items=10),
    FieldRule("next_steps", min_length=3, min_items=4, max_items=7),
)


def result_rules(next_steps_pattern: str) -> Tuple[FieldRule, ...]:
    """Rule table with the endpoint's next_steps pattern filled in."""
    rules = []
    for rule in RESULT_FIELDS:
        if rule.name == "next_steps":
            rule = FieldRule(rule.name, rule.min_length, rule.min_items, rule.max_items, pattern=next_steps_pattern)
        rules.append(rule)
    return tuple(rules)


def _property_schema(rule: FieldRule) -> Dict[str, Any]:
    string_schema: Dict[str, Any] = {"type": "string", "minLength": rule.min_length}
    if rule.pattern:
        string_schema["pattern"] = rule.pattern
    if not rule.is_array:
        return string_schema
    return {
        "type": "array",
        "minItems": rule.min_items,
        "maxItems": rule.max_items,
        "items": string_schema,
    }


def build_response_schema(rules: Tuple[FieldRule, ...]) -> Dict[str, Any]:
    return {
        "type": "object",
        "additionalProperties": False,
        "properties": {rule.name: _property_schema(rule) for rule in rules},
        "required": [rule.name for rule in rules],
    }
