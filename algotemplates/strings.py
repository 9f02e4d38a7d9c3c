"""String matching, tries, XOR tries and hashing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

_XOR_BITS = 31
_HASH_BUCKETS = 100003
_HASH_BASE = 131
_HASH_MASK = (1 << 64) - 1


def kmp_find_all(pattern: str, text: str) -> list[int]:
    """Return every 0-based start index of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    fail = [0] * len(pattern)
    j = 0
    for i in range(1, len(pattern)):
        while j and pattern[i] != pattern[j]:
            j = fail[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
        fail[i] = j
    matches = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = fail[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            matches.append(i - j + 1)
            j = fail[j - 1]
    return matches


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    count: int = 0


class Trie:
    """Multiset of strings supporting insertion and exact-match counting."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.count += 1

    def count(self, word: str) -> int:
        """Return how many times ``word`` was inserted."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return 0
        return node.count


def max_xor_pair(values: Iterable[int]) -> int:
    """Return the largest ``a ^ b`` over pairs of the given 31-bit non-negative values."""
    root: list = [None, None]
    best = 0
    for value in values:
        if not 0 <= value < 1 << _XOR_BITS:
            raise ValueError(f"value out of 31-bit range: {value}")
        node = root
        for bit in reversed(range(_XOR_BITS)):
            u = value >> bit & 1
            if node[u] is None:
                node[u] = [None, None]
            node = node[u]
        node = root
        partner = 0
        for bit in reversed(range(_XOR_BITS)):
            u = value >> bit & 1
            choice = u ^ 1 if node[u ^ 1] is not None else u
            node = node[choice]
            partner = partner << 1 | choice
        best = max(best, partner ^ value)
    return best


class IntHashSet:
    """Integer hash set with separate chaining over a fixed prime bucket count."""

    def __init__(self) -> None:
        self._buckets: dict[int, list[int]] = {}
        self._size = 0

    def add(self, x: int) -> None:
        """Insert ``x``; repeated insertions are kept."""
        self._buckets.setdefault(x % _HASH_BUCKETS, []).append(x)
        self._size += 1

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, int):
            return False
        return x in self._buckets.get(x % _HASH_BUCKETS, ())

    def __len__(self) -> int:
        return self._size


class StringHasher:
    """Polynomial prefix hashes (base 131, modulo 2**64) of a fixed string."""

    def __init__(self, text: str) -> None:
        self._length = len(text)
        self._prefix = [0]
        self._powers = [1]
        for ch in text:
            self._prefix.append((self._prefix[-1] * _HASH_BASE + ord(ch)) & _HASH_MASK)
            self._powers.append((self._powers[-1] * _HASH_BASE) & _HASH_MASK)

    def substring_hash(self, l: int, r: int) -> int:
        """Return the hash of the 1-based inclusive substring ``[l, r]``."""
        if l < 1 or r > self._length or l > r + 1:
            raise IndexError(f"substring [{l}, {r}] outside 1..{self._length}")
        return (self._prefix[r] - self._prefix[l - 1] * self._powers[r - l + 1]) & _HASH_MASK

    def same(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        """Return whether two 1-based inclusive substrings hash equal."""
        return self.substring_hash(l1, r1) == self.substring_hash(l2, r2)