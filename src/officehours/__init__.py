"""
Office Hours Helper.

Turns a free-text workflow problem into a validated, structured remediation
plan via a single schema-constrained LLM call.
"""

__version__ = "1.0.0"
