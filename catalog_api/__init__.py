"""
Catalog API: users and products kept in process memory.

The importable code lives in ``catalog_api.app``; this top level only
groups it under one distribution name, so ``uvicorn
catalog_api.app.main:app`` and the test suite resolve the same
modules.
"""

__all__ = []
