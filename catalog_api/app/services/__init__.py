"""
Service layer.

Each store encapsulates the records and rules of one resource kind.
Stores are plain objects built once by ``create_app`` and shared with
the routers through dependencies; nothing here is a module‑level
global.
"""
