"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource kind (users, products) has its own schema
module, store in ``services`` and router in ``api/endpoints``.
The stores are built by ``create_app`` and handed to the routers via
dependencies, so several independently configured applications can
coexist in one process (the test suite relies on this).
"""

from .main import app, create_app  # noqa: F401
