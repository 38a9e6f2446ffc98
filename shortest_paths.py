# shortest_paths.py
# All-pairs shortest paths (Floyd–Warshall) over a WordGraph, with next-hop
# tables for path reconstruction. Both tables are flat lists indexed i*V + j.

import math
import time
from typing import Dict, List, Optional, Sequence

from errors import InternalConsistencyError, NotFoundError
from path_cache import PathCache
from utils import UNREACHABLE, vlog

INFINITY = math.inf


class Snapshot:
    """
    Immutable result of one precomputation:
      - words: vertex order the tables were built from
      - index: word -> row/column of the tables
      - dist:  flat V*V list of edge counts (INFINITY when unreachable)
      - next_hop: flat V*V list, vertex after i on a shortest i->j path (None when unreachable)
      - version: graph version the tables describe
    """

    __slots__ = ("words", "index", "dist", "next_hop", "version", "_paths")

    def __init__(self, words: Sequence[str], dist: List[float], next_hop: List[Optional[int]], version: int = 0):
        self.words = tuple(words)
        self.index: Dict[str, int] = {w: i for i, w in enumerate(self.words)}
        self.dist = dist
        self.next_hop = next_hop
        self.version = version
        self._paths = PathCache()

    @property
    def size(self) -> int:
        return len(self.words)

    @property
    def path_cache(self) -> PathCache:
        return self._paths

    def distance(self, word1: str, word2: str) -> int:
        """Number of edges on a shortest path, or UNREACHABLE."""
        i, j = self._indices(word1, word2)
        d = self.dist[i * self.size + j]
        if d == INFINITY:
            return UNREACHABLE
        return int(d)

    def path(self, word1: str, word2: str) -> List[str]:
        """Words on a shortest path, both endpoints included; [] if unreachable."""
        i, j = self._indices(word1, word2)
        if self.dist[i * self.size + j] == INFINITY:
            return []
        return self._paths.get_or_build((i, j), lambda: self._walk(i, j))

    # ---------- Helpers ----------
    def _indices(self, word1: str, word2: str):
        i = self.index.get(word1)
        if i is None:
            raise NotFoundError(word1)
        j = self.index.get(word2)
        if j is None:
            raise NotFoundError(word2)
        return i, j

    def _walk(self, i: int, j: int) -> List[str]:
        V = self.size
        nxt = self.next_hop
        path = [self.words[i]]
        cur = i
        steps = 0
        while cur != j:
            if steps >= V:
                raise InternalConsistencyError(
                    f"path {self.words[i]} -> {self.words[j]} did not terminate within {V} steps"
                )
            hop = nxt[cur * V + j]
            if hop is None:
                raise InternalConsistencyError(
                    f"missing next hop at {self.words[cur]} towards {self.words[j]}"
                )
            cur = hop
            path.append(self.words[cur])
            steps += 1
        return path


def initial_tables(graph, words: Sequence[str], index: Dict[str, int]):
    """Distance and next-hop tables holding only the direct edges."""
    V = len(words)
    dist: List[float] = [INFINITY] * (V * V)
    nxt: List[Optional[int]] = [None] * (V * V)
    for i, w in enumerate(words):
        base = i * V
        dist[base + i] = 0
        nxt[base + i] = i
        for nbr in graph.neighbors(w):
            j = index[nbr]
            dist[base + j] = 1
            nxt[base + j] = j
    return dist, nxt


def floyd_warshall(dist: List[float], nxt: List[Optional[int]], V: int) -> None:
    """
    Relax ``dist``/``nxt`` in place. k is the outer loop and must stay
    sequential; a strict ``<`` keeps the first shortest path found.
    """
    for k in range(V):
        row_k = k * V
        for i in range(V):
            base = i * V
            d_ik = dist[base + k]
            if d_ik == INFINITY:
                continue
            hop_ik = nxt[base + k]
            for j in range(V):
                d_kj = dist[row_k + j]
                if d_kj == INFINITY:
                    continue
                cand = d_ik + d_kj
                if cand < dist[base + j]:
                    dist[base + j] = cand
                    nxt[base + j] = hop_ik


def compute_shortest_paths(graph) -> Snapshot:
    """Build a fresh Snapshot of ``graph``; nothing from earlier runs is reused."""
    t0 = time.time()
    version = graph.version
    words = graph.all_vertices()
    index = {w: i for i, w in enumerate(words)}
    V = len(words)
    dist, nxt = initial_tables(graph, words, index)
    floyd_warshall(dist, nxt, V)
    vlog(f"Shortest paths computed for {V} vertices", t0)
    return Snapshot(words, dist, nxt, version)
