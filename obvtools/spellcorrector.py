"""Suggestions of close dictionary words using edit distance."""

from __future__ import annotations

from dataclasses import dataclass, field


def levenshtein_distance(first: str, second: str, limit: int) -> int:
    """Edit distance between ``first`` and the first ``limit`` characters of ``second``."""
    limit = min(limit, len(second))
    target = second[:limit]
    previous = list(range(limit + 1))
    for i, char in enumerate(first):
        column = [i + 1]
        for j, other in enumerate(target):
            column.append(
                min(
                    previous[j + 1] + 1,
                    column[j] + 1,
                    previous[j] + (0 if char == other else 1),
                )
            )
        previous = column
    return previous[limit]


@dataclass
class SpellCorrector:
    """Matches words against a dictionary, ignoring case."""

    dictionary: list[str] = field(default_factory=list)
    threshold: int = 3

    def _fuzzy_match(self, word: str, candidate: str) -> int:
        score = levenshtein_distance(word, candidate, len(word) + 1)
        if score > self.threshold:
            return 0
        return self.threshold - score

    def suggest(self, word: str) -> list[str]:
        """Dictionary words close to ``word``, best matches first."""
        lowered = word.lower()
        scored = [
            (entry, score)
            for entry in self.dictionary
            if (score := self._fuzzy_match(lowered, entry.lower()))
        ]
        scored.sort(key=lambda item: item[1], reverse=True)
        return [entry for entry, _ in scored]