"""Infrastructure adapters implementing the core ports."""

from .content import JsonContentStore, load_content_store

__all__ = ["JsonContentStore", "load_content_store"]
