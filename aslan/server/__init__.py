"""HTTP surface: share-env readiness and OpenAPI request validation."""

from .app import create_app

__all__ = ["create_app"]
