"""
Main entrypoint for the Catalog API.

This module assembles the FastAPI application: it sets up logging,
builds the user and product stores together with their validation
strategies, registers the JSON error handlers and includes the
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn catalog_api.app.main:app --port 3000

The generated documentation UI is served at ``settings.docs_url``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .services.product_service import ProductStore
from .services.seed import SEED_PRODUCTS
from .services.user_service import UserStore
from .services.validation import product_validator, user_validator


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call builds fresh stores, so two applications never share
    records.  An unknown validation strategy name raises ``ValueError``
    here rather than on the first request.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module‑level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    docs_url = settings.docs_url or None
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url=docs_url,
        redoc_url="/redoc" if docs_url else None,
    )

    app.state.settings = settings
    app.state.user_validator = user_validator(settings.user_validation)
    app.state.user_store = UserStore()
    app.state.product_store = ProductStore(
        validator=product_validator(settings.product_validation),
        seed=SEED_PRODUCTS if settings.seed_products else (),
    )
    logger.info(
        "Validation strategies: users=%s products=%s",
        settings.user_validation,
        settings.product_validation,
    )

    register_error_handlers(app)
    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
