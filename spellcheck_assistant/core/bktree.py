# bktree.py
# BK-tree for approximate/fuzzy string matching (typo-tolerant lookup).
# Built once from a word list, then queried for every word within a given
# edit distance of a query word.
# - Nodes live in a flat arena (list); children are distance -> slot index.
# - Query uses an explicit stack (no recursion) and prunes using the
#   triangle inequality of the metric.

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional

from .distance import DistanceMetric, levenshtein

DEFAULT_RESULT_LIMIT = 20


class Suggestion(NamedTuple):
    """A (word, distance) match. Rank with rank(), not tuple order (word comes first)."""

    word: str
    distance: int


def rank(suggestions: Iterable[Suggestion], limit: Optional[int] = DEFAULT_RESULT_LIMIT) -> List[Suggestion]:
    """Sort by (distance asc, word asc) and only then truncate to `limit`."""
    out = sorted(suggestions, key=lambda s: (s.distance, s.word))
    if limit is not None and limit >= 0:
        out = out[:limit]
    return out


def linear_search(
    words: Iterable[str],
    query: str,
    tolerance: int,
    metric: DistanceMetric = levenshtein,
    limit: Optional[int] = DEFAULT_RESULT_LIMIT,
) -> List[Suggestion]:
    """Brute-force reference: compare the query against every word."""
    if tolerance < 0:
        return []
    seen = set()
    hits: List[Suggestion] = []
    for w in words:
        if w in seen:
            continue
        seen.add(w)
        d = metric(w, query)
        if d <= tolerance:
            hits.append(Suggestion(w, d))
    return rank(hits, limit)


class BKTree:
    """BK-tree over an arbitrary metric (Levenshtein by default)."""

    class Node:
        __slots__ = ("word", "children")

        def __init__(self, word: str):
            self.word = word
            self.children: Dict[int, int] = {}  # edge distance -> arena index

    def __init__(self, metric: DistanceMetric = levenshtein):
        self.metric = metric
        self._nodes: List[BKTree.Node] = []

    # insertion/building -------------------------------------------------------------
    def insert(self, word: str) -> bool:
        """
        Insert a single word. Returns True if a new node was created,
        False if the word was already present (or empty).
        First word inserted at a given edge distance owns that slot;
        later ones descend through it.
        """
        if not word or not isinstance(word, str):
            return False

        if not self._nodes:
            self._nodes.append(BKTree.Node(word))
            return True

        idx = 0
        while True:
            node = self._nodes[idx]
            d = self.metric(node.word, word)
            if d == 0:
                return False
            child = node.children.get(d)
            if child is None:
                node.children[d] = len(self._nodes)
                self._nodes.append(BKTree.Node(word))
                return True
            idx = child

    def insert_many(self, words: Iterable[str]) -> int:
        """Bulk insert in the given order. Returns the number of new nodes."""
        added = 0
        for w in words:
            if self.insert(w):
                added += 1
        return added

    # query ---------------------------------------------------------------------------
    def search(
        self, word: str, tolerance: int, limit: Optional[int] = DEFAULT_RESULT_LIMIT
    ) -> List[Suggestion]:
        """
        Return every stored word within `tolerance` of `word`, ranked by
        (distance, word) and capped at `limit` after sorting.
        Empty tree or negative tolerance -> [].
        """
        if not self._nodes or tolerance < 0 or not isinstance(word, str):
            return []

        hits: List[Suggestion] = []
        stack = [0]
        while stack:
            node = self._nodes[stack.pop()]
            d = self.metric(node.word, word)
            if d <= tolerance:
                hits.append(Suggestion(node.word, d))

            # a child at edge k holds words exactly k from node.word, so its
            # distance to the query lies in [|d - k|, d + k]
            low = max(0, d - tolerance)
            high = d + tolerance
            for k, child in node.children.items():
                if low <= k <= high:
                    stack.append(child)

        return rank(hits, limit)

    # utilities -------------------------------------------------------------------
    def __contains__(self, word: object) -> bool:
        """Exact lookup; follows one edge per level."""
        if not self._nodes or not isinstance(word, str) or not word:
            return False
        idx: Optional[int] = 0
        while idx is not None:
            node = self._nodes[idx]
            d = self.metric(node.word, word)
            if d == 0:
                return True
            idx = node.children.get(d)
        return False

    def __len__(self) -> int:
        return len(self._nodes)

    def size(self) -> int:
        return len(self._nodes)

    def words(self) -> Iterator[str]:
        """Stored words in insertion (arena) order."""
        for node in self._nodes:
            yield node.word

    def depth(self) -> int:
        """Number of levels (0 for an empty tree)."""
        if not self._nodes:
            return 0
        best = 0
        stack = [(0, 1)]
        while stack:
            idx, level = stack.pop()
            if level > best:
                best = level
            for child in self._nodes[idx].children.values():
                stack.append((child, level + 1))
        return best

    def clear(self) -> None:
        """Remove all nodes."""
        self._nodes = []
