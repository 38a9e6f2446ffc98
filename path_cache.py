from collections import OrderedDict

CACHE_DISABLED = False

# LRU cache using OrderedDict
MAX_CACHE_SIZE = 50000
class LRUCache(OrderedDict):
    def __init__(self, maxsize=MAX_CACHE_SIZE, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.maxsize = maxsize
    def __getitem__(self, key):
        value = super().__getitem__(key)
        self.move_to_end(key)
        return value
    def __setitem__(self, key, value):
        if key in self:
            self.move_to_end(key)
        super().__setitem__(key, value)
        if len(self) > self.maxsize:
            oldest = next(iter(self))
            del self[oldest]


class PathCache:
    """Reconstructed paths keyed by ``(source_index, target_index)``.

    One instance belongs to one snapshot, so indices never leak across
    rebuilds. When CACHE_DISABLED is True every lookup recomputes without
    touching the hit/miss counters.
    """

    def __init__(self, maxsize=None):
        self._entries = LRUCache(MAX_CACHE_SIZE if maxsize is None else maxsize)
        self.hits = 0
        self.misses = 0

    def get_or_build(self, key, build):
        if CACHE_DISABLED:
            return list(build())
        if key in self._entries:
            self.hits += 1
            return list(self._entries[key])
        self.misses += 1
        path = tuple(build())
        self._entries[key] = path
        return list(path)

    def __len__(self):
        return len(self._entries)


def print_cache_summary(cache):
    print(f"[CACHE SUMMARY] Cached paths: {len(cache)}")
    print(f"[CACHE SUMMARY] Actual cache hits: {cache.hits}")
    print(f"[CACHE SUMMARY] Actual cache misses: {cache.misses}")
