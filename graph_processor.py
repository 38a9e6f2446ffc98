# graph_processor.py
# Owns the word graph and the latest shortest-path snapshot.

import concurrent.futures
import functools
import time

from adjacency import adjacent_pairs_for_row
from errors import NotPrecomputedError, StaleSnapshotError
from shortest_paths import compute_shortest_paths
from utils import vlog
from word_graph import WordGraph
from word_source import load_words


class GraphProcessor:
    """
    Typical use::

        gp = GraphProcessor()
        gp.populate(words)       # any number of times
        gp.precompute()          # after every populate
        gp.shortest_path("CAT", "WHEAT")
        gp.shortest_distance("CAT", "WHEAT")

    Queries read the snapshot built by the last precompute(). Any change to
    the graph after that makes the snapshot stale and queries fail until
    precompute() runs again.
    """

    def __init__(self):
        self._graph = WordGraph()
        self._snapshot = None

    @property
    def graph(self):
        return self._graph

    @property
    def snapshot(self):
        return self._snapshot

    @property
    def is_stale(self):
        return self._snapshot is None or self._snapshot.version != self._graph.version

    # ---------- Population ----------
    def populate(self, words, workers=None):
        """
        Add ``words`` as vertices and connect every adjacent pair in the whole
        vertex set, old words included. Returns how many words were processed.
        """
        t0 = time.time()
        count = 0
        for w in words:
            self._graph.add_vertex(w)
            count += 1

        vertices = self._graph.all_vertices()
        added = 0
        for i, j in self._adjacent_pairs(vertices, workers):
            if self._graph.add_edge(vertices[i], vertices[j]):
                added += 1
        vlog(f"Populated {count} words ({len(vertices)} vertices, {added} new edges)", t0)
        return count

    def populate_from_source(self, source, workers=None):
        """Load a dictionary file or URL and populate from it."""
        return self.populate(load_words(source), workers=workers)

    def _adjacent_pairs(self, vertices, workers):
        n = len(vertices)
        if not workers or workers <= 1 or n < 2:
            for i in range(n):
                yield from adjacent_pairs_for_row(vertices, i)
            return

        find_row = functools.partial(adjacent_pairs_for_row, vertices)
        chunksize = max(1, n // (workers * 4))
        with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
            # map() preserves row order, so edges go in deterministically
            for row in executor.map(find_row, range(n), chunksize=chunksize):
                yield from row

    # ---------- Precomputation ----------
    def precompute(self):
        """Rebuild the shortest-path tables from scratch and swap them in."""
        self._snapshot = compute_shortest_paths(self._graph)

    # ---------- Queries ----------
    def shortest_path(self, word1, word2):
        return self._current().path(word1, word2)

    def shortest_distance(self, word1, word2):
        return self._current().distance(word1, word2)

    def _current(self):
        snap = self._snapshot
        if snap is None:
            raise NotPrecomputedError("precompute() has not been called")
        if snap.version != self._graph.version:
            raise StaleSnapshotError(
                f"graph changed since precompute() (version {snap.version} -> {self._graph.version})"
            )
        return snap
