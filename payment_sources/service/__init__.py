"""Request envelope helpers consumed by an external dispatcher."""

from .source_request_build import SourceRequest, build_create_source_request

__all__ = ["SourceRequest", "build_create_source_request"]
