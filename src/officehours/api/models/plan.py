"""
API models for the triage and plan endpoints.

The endpoints read the raw body themselves (size ceiling, base64, JSON errors
all need the untouched bytes), so these models document the wire format in
the OpenAPI schema rather than parse requests.
"""

from pydantic import BaseModel, Field
from typing import List

class TriageRequest(BaseModel):
    """Request body for the triage endpoint."""
    userMessage: str = Field(..., description="Free-text description of the ticket or problem", max_length=8000)

    class Config:
        json_schema_extra = {
            "example": {
                "userMessage": "Our team triages hundreds of Jira tickets manually each week and it's hard to prioritize and route them consistently."
            }
        }

class PlanRequest(BaseModel):
    """Request body for the plan endpoint."""
    input: str = Field(..., description="Free-text description of the workflow problem", max_length=8000)

    class Config:
        json_schema_extra = {
            "example": {
                "input": "We copy customer feedback from email into a spreadsheet by hand every Friday."
            }
        }

class PlanResult(BaseModel):
    """Validated six-field result returned on success."""
    problem_statement: str = Field(..., min_length=10)
    clarifying_questions: List[str] = Field(..., min_length=3, max_length=5)
    proposed_approach: List[str] = Field(..., min_length=4, max_length=7)
    recommended_tools: List[str] = Field(..., min_length=1, max_length=10)
    risks_and_privacy: List[str] = Field(..., min_length=1, max_length=10)
    next_steps: List[str] = Field(..., min_length=4, max_length=7)

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "problem_statement": "Manual weekly triage of Jira tickets is slow and inconsistent.",
                "clarifying_questions": [
                    "How many tickets arrive per week?",
                    "Which teams receive routed tickets?",
                    "What fields are filled in reliably?"
                ],
                "proposed_approach": [
                    "Define a shared priority rubric",
                    "Tag tickets automatically by component",
                    "Route by component ownership",
                    "Review misroutes weekly"
                ],
                "recommended_tools": ["Jira Automation"],
                "risks_and_privacy": ["Tickets may contain customer personal data."],
                "next_steps": [
                    "Define the priority rubric",
                    "Implement component tagging rules",
                    "Review the first week of routing",
                    "Automate the weekly report"
                ]
            }
        }
