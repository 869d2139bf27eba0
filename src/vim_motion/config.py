"""Configuration for motion sessions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from vim_motion.motion.classifier import WORD_PUNCTUATION, normalize_punctuation
from vim_motion.runtime.telemetry import ENV_PREFIX


@dataclass(frozen=True, slots=True)
class MotionConfig:
    """Settings a session compiles its word classifier from."""

    word_punctuation: str = WORD_PUNCTUATION

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "word_punctuation", normalize_punctuation(self.word_punctuation)
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MotionConfig":
        env = os.environ if environ is None else environ
        punctuation = env.get(f"{ENV_PREFIX}WORD_PUNCTUATION")
        if punctuation is None:
            return cls()
        return cls(word_punctuation=punctuation)


__all__ = ["MotionConfig"]
