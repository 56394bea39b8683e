"""
Pydantic schema definitions for API payloads.

Each resource kind defines its own models for request and response
bodies.  Request models double as the ``schema`` validation strategy
(see ``services.validation``), playing the part an OpenAPI document
validator would play in front of the stores.
"""
