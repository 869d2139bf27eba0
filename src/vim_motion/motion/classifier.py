"""Word / WORD boundary scanning over a single line of text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

WORD_PUNCTUATION = "/\\()\"':,.;<>~!@#$%^&*|+=[]{}`?-"
BIG_WORD_PUNCTUATION = ""


class RunKind(str, Enum):
    BLANK = "blank"
    WORD = "word"
    PUNCTUATION = "punctuation"


_KIND_BY_GROUP = {1: RunKind.BLANK, 2: RunKind.WORD, 3: RunKind.PUNCTUATION}


@dataclass(frozen=True, slots=True)
class Run:
    start: int
    length: int
    kind: RunKind

    @property
    def end(self) -> int:
        """Offset of the last character in the run (``-1`` for an empty line)."""

        return self.start + self.length - 1


def normalize_punctuation(characters: str) -> str:
    unique = "".join(dict.fromkeys(characters))
    if any(char.isspace() for char in unique):
        raise ValueError("punctuation set cannot contain whitespace")
    return unique


def compile_run_pattern(punctuation: str) -> re.Pattern[str]:
    """Build the ordered alternation of blank-line, word and punctuation runs."""

    escaped = re.escape(punctuation)
    segments = [r"(^[\t ]*$)", rf"([^\s{escaped}]+)"]
    if escaped:
        segments.append(rf"([{escaped}]+)")
    return re.compile("|".join(segments))


@dataclass(frozen=True, slots=True)
class BoundaryClassifier:
    """Compiled scanner splitting a line into word-motion runs.

    An empty ``punctuation`` set yields WORD semantics: every maximal
    non-whitespace run is a single unit. Build one per configuration and
    share it; instances hold no per-line state.
    """

    punctuation: str = WORD_PUNCTUATION
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        punctuation = normalize_punctuation(self.punctuation)
        object.__setattr__(self, "punctuation", punctuation)
        object.__setattr__(self, "pattern", compile_run_pattern(punctuation))

    def runs(self, text: str) -> Iterator[Run]:
        for match in self.pattern.finditer(text):
            kind = _KIND_BY_GROUP[match.lastindex or 1]
            yield Run(match.start(), match.end() - match.start(), kind)

    def starts(self, text: str) -> list[int]:
        """Run start offsets, left to right."""

        return [run.start for run in self.runs(text)]

    def ends(self, text: str) -> list[int]:
        """Run end offsets (last character of each run), left to right."""

        return [run.end for run in self.runs(text)]


WORD_CLASSIFIER = BoundaryClassifier(WORD_PUNCTUATION)
BIG_WORD_CLASSIFIER = BoundaryClassifier(BIG_WORD_PUNCTUATION)


__all__ = [
    "BIG_WORD_CLASSIFIER",
    "BIG_WORD_PUNCTUATION",
    "BoundaryClassifier",
    "Run",
    "RunKind",
    "WORD_CLASSIFIER",
    "WORD_PUNCTUATION",
    "compile_run_pattern",
    "normalize_punctuation",
]
