# sqvect

This package holds the parts of a vector store that work in memory. It
gives you data types for embeddings and search settings, three similarity
measures, an approximate nearest-neighbour index (HNSW), and helpers that
filter search candidates by their metadata. It uses only the standard
library.

## Installation

```
pip install sqvect
```

## Data types: `sqvect.models`

- `Embedding(id, vector, content="", doc_id="", metadata=None)` holds a vector together with its content, a document id and a string metadata map.
- `ScoredEmbedding` is an `Embedding` with a `score` field, which defaults to `0.0`.
- `SearchOptions(top_k=10, filter=None, threshold=0.0)` holds search settings. A `top_k` of zero or less is meant to stand for ten results. A `threshold` of zero or less means no minimum score.
- `StoreStats(count, dimensions, size)` and `DocumentInfo(doc_id, embedding_count, first_created=None, last_updated=None)` are frozen records.
- `HNSWConfig(enabled=False, m=16, ef_construction=200, ef_search=50)` holds index settings.
- `Config(path="", vector_dim=0, max_conns=10, batch_size=100, similarity_fn=cosine_similarity, hnsw=HNSWConfig())` holds store settings.
- `default_hnsw_config()` and `default_config()` return these defaults. The index is disabled in them, and no path or dimension is set.
- `VERSION` is `"0.2.0"`.

## Similarity functions: `sqvect.similarity`

```python
from sqvect.similarity import cosine_similarity, dot_product, euclidean_distance

cosine_similarity([1.0, 0.0], [0.0, 1.0])   # 0.0
dot_product([1.0, 0.0], [-1.0, 0.0])        # -1.0
euclidean_distance([0.0, 0.0], [3.0, 4.0])  # -5.0 (higher means more similar)
```

All three functions follow the rule that a higher result means more similar.

- For vectors of different lengths, `cosine_similarity` and `dot_product` return `0.0`, and `euclidean_distance` returns negative infinity.
- For a zero vector, `cosine_similarity` returns `0.0`.

`get_cosine_similarity()`, `get_dot_product()` and `get_euclidean_dist()` return the same functions. The `SimilarityFunc` alias is the type of such a function.

## HNSW index: `sqvect.hnsw`

```python
from sqvect.hnsw import HNSWIndex

index = HNSWIndex(m=16, ef_construction=200)
index.insert(1, [1.0, 0.0, 0.0])
index.insert(2, [0.0, 1.0, 0.0])

index.search([1.0, 0.1, 0.0], k=1, ef=50)   # [1]
len(index)                                  # 2
2 in index                                  # True
```

The index stores vectors under integer keys and measures cosine distance,
which is one minus the cosine similarity.

- `search` returns up to `k` keys, closest first.
- If you insert an existing key again, its vector is replaced and the key is linked again.
- `m` below 2 raises `ValueError`, and so does `ef_construction` below 1.
- Level assignment uses a fixed seed, so the same inserts always build the same graph.

## Metadata filters: `sqvect.filters`

- `matches_filter(metadata, filter)` checks for exact string matches.
  - It skips the key `doc_id`.
  - A key missing from the metadata reads as the empty string.
  - `None` metadata fails any other key.
- `compare_metadata_values(actual, expected)` compares values across types.
  - A string matches an int, float or bool by its text form. For example, `"1"` matches `1`, `"true"` matches `True`, and `"1e+06"` matches `1e6`.
  - A number or bool matches a string that parses to an equal value.
- `filter_by_metadata(candidates, filters)` keeps the candidates whose `.metadata` holds every filter key with a matching value.
  - Candidates with no metadata are dropped.
  - Empty `filters` keeps every candidate.

```python
from sqvect.filters import compare_metadata_values, matches_filter

matches_filter({"type": "article"}, {"doc_id": "doc_1", "type": "article"})  # True
compare_metadata_values("2", 2)                                               # True
```

## What this package does not do

The package has no persistent storage. Nothing here opens or writes a
database file. There is no store object with upsert, search, delete or
statistics operations. There is no binary encoding of vectors or JSON
encoding of metadata, and no validation of vectors or embeddings. The
package also has no error types of its own.

`Config`, `StoreStats` and `DocumentInfo` are plain data records, and
nothing in the package reads them or fills them in. To search, combine the
parts yourself:

1. Score candidates with a similarity function.
2. Narrow the candidates with the filters.
3. Optionally, pick the candidates with `HNSWIndex`.