# word_graph.py
# Undirected, unweighted graph over distinct words.

from typing import Dict, Iterator, List, Set

from errors import NotFoundError


class WordGraph:
    """
    Adjacency-set graph keyed by word:
      - add_vertex(word) -> bool      (False if already present)
      - add_edge(word1, word2) -> bool (False if already present)
      - all_vertices() -> List[str]   (insertion order)
      - neighbors(word) -> Set[str]
    ``version`` goes up by one for every vertex or edge that is actually
    added, so a precomputed snapshot can tell when it is out of date.
    The graph only ever grows.
    """

    __slots__ = ("_adj", "_edge_count", "version")

    def __init__(self):
        # dicts keep insertion order; that order becomes the index mapping
        self._adj: Dict[str, Set[str]] = {}
        self._edge_count = 0
        self.version = 0

    # ---------- Mutation ----------
    def add_vertex(self, word: str) -> bool:
        if word in self._adj:
            return False
        self._adj[word] = set()
        self.version += 1
        return True

    def add_edge(self, word1: str, word2: str) -> bool:
        if word1 == word2:
            raise ValueError(f"self-loop on {word1!r}")
        n1 = self._require(word1)
        n2 = self._require(word2)
        if word2 in n1:
            return False
        n1.add(word2)
        n2.add(word1)
        self._edge_count += 1
        self.version += 1
        return True

    # ---------- Queries ----------
    def all_vertices(self) -> List[str]:
        return list(self._adj)

    def neighbors(self, word: str) -> Set[str]:
        return set(self._require(word))

    def has_edge(self, word1: str, word2: str) -> bool:
        nbrs = self._adj.get(word1)
        return nbrs is not None and word2 in nbrs

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __contains__(self, word) -> bool:
        return word in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adj)

    def __repr__(self) -> str:
        return f"WordGraph with {len(self._adj)} vertices, {self._edge_count} edges"

    # ---------- Helpers ----------
    def _require(self, word: str) -> Set[str]:
        nbrs = self._adj.get(word)
        if nbrs is None:
            raise NotFoundError(word)
        return nbrs
