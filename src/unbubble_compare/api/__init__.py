"""HTTP surface."""

from unbubble_compare.api.app import create_app, fallback_headers

__all__ = ["create_app", "fallback_headers"]
