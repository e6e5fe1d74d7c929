from sqvect.models import (
    Config,
    DocumentInfo,
    Embedding,
    HNSWConfig,
    ScoredEmbedding,
    SearchOptions,
    default_config,
    default_hnsw_config,
)
from sqvect.similarity import cosine_similarity


def test_default_hnsw_config_values():
    hnsw = default_hnsw_config()
    assert hnsw.enabled is False
    assert (hnsw.m, hnsw.ef_construction, hnsw.ef_search) == (16, 200, 50)


def test_default_hnsw_config_matches_dataclass_defaults():
    assert default_hnsw_config() == HNSWConfig()


def test_default_config_values():
    config = default_config()
    assert config.max_conns == 10
    assert config.batch_size == 100
    assert config.similarity_fn is cosine_similarity
    assert config.hnsw == default_hnsw_config()
    assert config.path == ""
    assert config.vector_dim == 0


def test_configs_do_not_share_hnsw_settings():
    first = default_config()
    second = default_config()
    first.hnsw.enabled = True
    assert second.hnsw.enabled is False
    assert Config().hnsw.enabled is False


def test_embedding_defaults_and_equality():
    emb = Embedding(id="a", vector=[1.0, 2.0])
    assert emb.content == ""
    assert emb.doc_id == ""
    assert emb.metadata is None
    assert emb == Embedding(id="a", vector=[1.0, 2.0])


def test_scored_embedding_extends_embedding():
    scored = ScoredEmbedding(id="a", vector=[1.0], content="x", score=0.5)
    assert isinstance(scored, Embedding)
    assert scored.score == 0.5
    assert ScoredEmbedding(id="b", vector=[1.0]).score == 0.0


def test_search_options_defaults():
    options = SearchOptions()
    assert options.filter is None
    assert options.threshold == 0.0


def test_document_info_optional_timestamps():
    info = DocumentInfo(doc_id="doc1", embedding_count=2)
    assert info.first_created is None
    assert info.last_updated is None
    assert info.embedding_count == 2