"""Vector store building blocks: data types, similarity measures, an HNSW index and metadata filters."""

__version__ = "0.2.0"

__all__ = ["filters", "hnsw", "models", "similarity"]