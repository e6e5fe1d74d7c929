"""Data types of the vector store.

The store keeps embeddings (vectors with content, an optional document id and
string metadata) in a single SQLite file and searches them by similarity:
cosine similarity (the default), dot product or negative Euclidean distance.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .similarity import SimilarityFunc, cosine_similarity

VERSION = "0.2.0"


@dataclass
class Embedding:
    """A vector with its content, document id and metadata."""

    id: str
    vector: Sequence[float]
    content: str = ""
    doc_id: str = ""
    metadata: dict[str, str] | None = None


@dataclass
class ScoredEmbedding(Embedding):
    """An embedding together with its similarity score for a query."""

    score: float = 0.0


@dataclass
class SearchOptions:
    """Options of a similarity search.

    A ``top_k`` of zero or less means ten results; a ``threshold`` of zero or
    less applies no minimum score.
    """

    top_k: int = 10
    filter: dict[str, str] | None = None
    threshold: float = 0.0


@dataclass(frozen=True)
class StoreStats:
    """Number of embeddings, their dimension and the database size in bytes."""

    count: int
    dimensions: int
    size: int


@dataclass(frozen=True)
class DocumentInfo:
    """Summary of the embeddings stored for one document id."""

    doc_id: str
    embedding_count: int
    first_created: str | None = None
    last_updated: str | None = None


@dataclass
class HNSWConfig:
    """Settings of the approximate nearest-neighbour index."""

    enabled: bool = False
    m: int = 16
    ef_construction: int = 200
    ef_search: int = 50


@dataclass
class Config:
    """Configuration of a vector store."""

    path: str = ""
    vector_dim: int = 0
    max_conns: int = 10
    batch_size: int = 100
    similarity_fn: SimilarityFunc | None = cosine_similarity
    hnsw: HNSWConfig = field(default_factory=HNSWConfig)


def default_hnsw_config() -> HNSWConfig:
    """Return the default index settings, with the index disabled."""
    return HNSWConfig(enabled=False, m=16, ef_construction=200, ef_search=50)


def default_config() -> Config:
    """Return the default store configuration, without path or dimension."""
    return Config(
        max_conns=10,
        batch_size=100,
        similarity_fn=cosine_similarity,
        hnsw=default_hnsw_config(),
    )