"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  Two
fields select how request payloads are checked before they reach the
stores: ``user_validation`` (``schema`` or ``none``) and
``product_validation`` (``rules``, ``schema`` or ``none``).  See
``services.validation`` for the strategies behind these names.
"""

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Catalog API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Path of the generated documentation UI.  An empty value disables
    # both the UI and the ReDoc page.
    docs_url: str = field(default_factory=lambda: os.getenv("DOCS_URL", "/docs"))

    # Validation strategy names, resolved by ``services.validation``.
    user_validation: str = field(default_factory=lambda: os.getenv("USER_VALIDATION", "schema"))
    product_validation: str = field(default_factory=lambda: os.getenv("PRODUCT_VALIDATION", "rules"))

    # When false the product store starts empty instead of with the
    # two demo records from ``services.seed``.
    seed_products: bool = field(default_factory=lambda: _env_flag("SEED_PRODUCTS", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests construct their
# own ``Settings`` instead.
settings = Settings()
