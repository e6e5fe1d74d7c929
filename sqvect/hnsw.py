"""Approximate nearest-neighbour index (HNSW) over cosine distance."""

from __future__ import annotations

import heapq
import math
import random
from collections.abc import Iterable

from .similarity import cosine_similarity

_LEVEL_SEED = 0x5EED


def _distance(a: tuple[float, ...], b: tuple[float, ...]) -> float:
    return 1.0 - cosine_similarity(a, b)


class HNSWIndex:
    """Hierarchical navigable small-world graph keyed by integers.

    Distances are cosine distances (one minus cosine similarity). Inserting a
    key that is already present replaces its vector and relinks it.
    """

    def __init__(self, m: int = 16, ef_construction: int = 200) -> None:
        if m < 2:
            raise ValueError(f"m must be at least 2, got {m}")
        if ef_construction < 1:
            raise ValueError(
                f"ef_construction must be positive, got {ef_construction}"
            )
        self._m = m
        self._ef_construction = ef_construction
        self._level_factor = 1.0 / math.log(m)
        self._rng = random.Random(_LEVEL_SEED)
        self._vectors: dict[int, tuple[float, ...]] = {}
        self._levels: dict[int, int] = {}
        self._graph: list[dict[int, list[int]]] = []
        self._entry: int | None = None
        self._max_level = -1

    def __len__(self) -> int:
        return len(self._vectors)

    def __contains__(self, key: object) -> bool:
        return key in self._vectors

    def insert(self, key: int, vector: Iterable[float]) -> None:
        """Add ``vector`` under ``key``, or replace the vector stored there."""
        vec = tuple(float(value) for value in vector)
        if key in self._levels:
            self._vectors[key] = vec
            if len(self._vectors) > 1:
                self._connect(key, vec, self._levels[key])
            return

        level = self._random_level()
        self._vectors[key] = vec
        self._levels[key] = level
        while len(self._graph) <= level:
            self._graph.append({})
        for layer in range(level + 1):
            self._graph[layer][key] = []

        if self._entry is None:
            self._entry = key
            self._max_level = level
            return

        self._connect(key, vec, level)
        if level > self._max_level:
            self._entry = key
            self._max_level = level

    def search(self, query: Iterable[float], k: int, ef: int) -> list[int]:
        """Return up to ``k`` keys nearest to ``query``, closest first."""
        if k <= 0 or self._entry is None:
            return []
        vec = tuple(float(value) for value in query)
        entry = self._entry
        for layer in range(self._max_level, 0, -1):
            entry = self._search_layer(vec, [entry], 1, layer)[0][1]
        found = self._search_layer(vec, [entry], max(ef, k), 0)
        return [key for _, key in found[:k]]

    def _random_level(self) -> int:
        return int(-math.log(1.0 - self._rng.random()) * self._level_factor)

    def _max_links(self, layer: int) -> int:
        return 2 * self._m if layer == 0 else self._m

    def _connect(self, key: int, vec: tuple[float, ...], level: int) -> None:
        entry = self._entry
        for layer in range(self._max_level, level, -1):
            entry = self._search_layer(vec, [entry], 1, layer)[0][1]
        for layer in range(min(level, self._max_level), -1, -1):
            found = self._search_layer(vec, [entry], self._ef_construction, layer)
            neighbours = [other for _, other in found if other != key]
            neighbours = neighbours[: self._max_links(layer)]
            self._graph[layer][key] = neighbours
            for other in neighbours:
                self._link(other, key, layer)
            entry = found[0][1]

    def _link(self, node: int, new: int, layer: int) -> None:
        links = self._graph[layer][node]
        if new in links:
            return
        links.append(new)
        limit = self._max_links(layer)
        if len(links) > limit:
            origin = self._vectors[node]
            links.sort(key=lambda other: _distance(origin, self._vectors[other]))
            del links[limit:]

    def _search_layer(
        self,
        query: tuple[float, ...],
        entry_points: list[int],
        ef: int,
        layer: int,
    ) -> list[tuple[float, int]]:
        visited = set(entry_points)
        candidates = [
            (_distance(query, self._vectors[point]), point) for point in entry_points
        ]
        heapq.heapify(candidates)
        best = [(-dist, point) for dist, point in candidates]
        heapq.heapify(best)
        while len(best) > ef:
            heapq.heappop(best)

        links = self._graph[layer]
        while candidates:
            dist, node = heapq.heappop(candidates)
            if len(best) >= ef and dist > -best[0][0]:
                break
            for other in links.get(node, ()):
                if other in visited:
                    continue
                visited.add(other)
                other_dist = _distance(query, self._vectors[other])
                if len(best) < ef or other_dist < -best[0][0]:
                    heapq.heappush(candidates, (other_dist, other))
                    heapq.heappush(best, (-other_dist, other))
                    if len(best) > ef:
                        heapq.heappop(best)

        return sorted((-neg, point) for neg, point in best)