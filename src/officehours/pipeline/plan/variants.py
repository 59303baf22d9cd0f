from .types import PlanVariant
from .schema import GENERIC_NEXT_STEP_PATTERN, ACTION_VERB_NEXT_STEP_PATTERN

# Triage restricts next_steps to a closed verb list; the plan endpoint accepts
# any capitalized leading word after an optional numbering/bullet prefix.
TRIAGE = PlanVariant(
    name="triage",
    input_field="userMessage",
    task="triage",
    prompt_ref="triage/respond@v1",
    schema_name="triage_response",
    next_steps_pattern=ACTION_VERB_NEXT_STEP_PATTERN,
)

GENERATE_PLAN = PlanVariant(
    name="generatePlan",
    input_field="input",
    task="generate_plan",
    prompt_ref="plan/generate@v1",
    schema_name="office_hours_plan",
    next_steps_pattern=GENERIC_NEXT_STEP_PATTERN,
)
