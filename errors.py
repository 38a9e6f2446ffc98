# errors.py
# Everything raised by the graph API derives from WordGraphError.


class WordGraphError(Exception):
    """Base class for word graph failures."""


class WordSourceUnavailable(WordGraphError):
    """The dictionary file or URL could not be read."""


class NotFoundError(WordGraphError, KeyError):
    """A query word is not a vertex of the graph."""

    def __init__(self, word):
        super().__init__(word)
        self.word = word

    def __str__(self):
        return f"word not in graph: {self.word!r}"


class NotPrecomputedError(WordGraphError):
    """Shortest paths were requested before precompute() ran."""


class StaleSnapshotError(NotPrecomputedError):
    """The graph changed after the last precompute()."""


class InternalConsistencyError(WordGraphError):
    """Path reconstruction walked off the next-hop table."""
