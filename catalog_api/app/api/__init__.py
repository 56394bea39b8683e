"""
API package containing the routers.

``router.py`` aggregates the resource routers defined in
``endpoints``; ``deps.py`` exposes the stores and validation
strategies that ``create_app`` attached to the application state.
"""
