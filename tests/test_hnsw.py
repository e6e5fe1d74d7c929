import random

import pytest

from sqvect.hnsw import HNSWIndex
from sqvect.similarity import cosine_similarity


def _vectors(count, dim=8, seed=7):
    rng = random.Random(seed)
    return {key: [rng.gauss(0.0, 1.0) for _ in range(dim)] for key in range(1, count + 1)}


@pytest.fixture
def populated():
    vectors = _vectors(100)
    index = HNSWIndex(m=16, ef_construction=200)
    for key, vec in vectors.items():
        index.insert(key, vec)
    return index, vectors


def test_empty_index_returns_nothing():
    index = HNSWIndex(16, 200)
    assert index.search([1.0, 0.0], 5, 50) == []
    assert len(index) == 0


def test_length_counts_distinct_keys(populated):
    index, vectors = populated
    assert len(index) == len(vectors)
    assert 1 in index
    assert 0 not in index


def test_stored_vector_finds_itself_first(populated):
    index, vectors = populated
    for key in list(vectors)[:20]:
        assert index.search(vectors[key], 1, len(vectors))[0] == key


def test_matches_exhaustive_ranking(populated):
    index, vectors = populated
    query = _vectors(1, seed=99)[1]
    expected = sorted(
        vectors, key=lambda key: cosine_similarity(query, vectors[key]), reverse=True
    )[:5]
    assert index.search(query, 5, len(vectors)) == expected


def test_results_are_distinct_and_ordered(populated):
    index, vectors = populated
    query = _vectors(1, seed=3)[1]
    keys = index.search(query, 10, 50)
    assert len(keys) == 10
    assert len(set(keys)) == 10
    scores = [cosine_similarity(query, vectors[key]) for key in keys]
    assert scores == sorted(scores, reverse=True)


def test_k_larger_than_index_returns_everything(populated):
    index, vectors = populated
    keys = index.search(vectors[1], 500, 10)
    assert sorted(keys) == sorted(vectors)


def test_non_positive_k_returns_nothing(populated):
    index, vectors = populated
    assert index.search(vectors[1], 0, 50) == []
    assert index.search(vectors[1], -3, 50) == []


def test_single_node():
    index = HNSWIndex(4, 10)
    index.insert(42, [0.0, 1.0, 0.0])
    assert index.search([1.0, 0.0, 0.0], 3, 10) == [42]


def test_reinsert_replaces_vector():
    index = HNSWIndex(4, 10)
    index.insert(1, [1.0, 0.0, 0.0])
    index.insert(2, [0.0, 1.0, 0.0])
    index.insert(3, [0.0, 0.0, 1.0])
    index.insert(1, [0.0, 0.9, 0.1])
    assert len(index) == 3
    assert index.search([1.0, 0.0, 0.0], 3, 10)[-1] != 1
    assert index.search([0.0, 0.9, 0.1], 1, 10) == [1]


@pytest.mark.parametrize("m, ef", [(1, 200), (0, 200), (16, 0)])
def test_invalid_parameters(m, ef):
    with pytest.raises(ValueError):
        HNSWIndex(m, ef)