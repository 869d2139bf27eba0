from __future__ import annotations

from typing import Sequence

import pytest


@pytest.fixture
def three_lines() -> Sequence[str]:
    return ("abcdef", "ab", "abcdef")
