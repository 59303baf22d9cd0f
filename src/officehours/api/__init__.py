"""
FastAPI application layer for the Office Hours Helper.

This module exposes the triage and plan endpoints over HTTP, turning raw
requests into pipeline runs and pipeline failures into JSON error envelopes.
"""
