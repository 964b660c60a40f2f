"""Authority instance discovery and metadata caching."""
