# adjacency.py
# Two words are neighbors when one edit (substitute, insert or delete a
# single letter) turns one into the other.

from collections import Counter


def is_adjacent(word1: str, word2: str) -> bool:
    """
    True if ``word1`` and ``word2`` differ by exactly one character edit.
    Equal words are never adjacent. Comparison ignores case.
    """
    a = word1.lower()
    b = word2.lower()
    if a == b:
        return False
    diff = len(a) - len(b)
    if diff == 0:
        return _one_substitution(a, b)
    if diff == 1:
        return _one_insertion(a, b)
    if diff == -1:
        return _one_insertion(b, a)
    return False


def _one_substitution(a: str, b: str) -> bool:
    mismatches = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            mismatches += 1
            if mismatches > 1:
                return False
    return mismatches == 1


def _one_insertion(longer: str, shorter: str) -> bool:
    """
    ``longer`` is one letter longer than ``shorter``. Find the letter left over
    once every letter of ``shorter`` has been consumed, then check that putting
    it back somewhere in ``shorter`` rebuilds ``longer``.
    """
    unused = Counter(shorter)
    missing = []
    for ch in longer:
        if unused[ch] > 0:
            unused[ch] -= 1
        else:
            missing.append(ch)
            if len(missing) > 1:
                return False
    if len(missing) != 1:
        return False

    ch = missing[0]
    for i in range(len(longer)):
        if shorter[:i] + ch + shorter[i:] == longer:
            return True
    return False


def adjacent_pairs_for_row(words, i):
    """Return ``[(i, j), ...]`` for every ``j > i`` with ``words[j]`` adjacent to ``words[i]``."""
    w = words[i]
    return [(i, j) for j in range(i + 1, len(words)) if is_adjacent(w, words[j])]
