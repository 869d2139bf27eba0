from __future__ import annotations

import pytest

from vim_motion.config import MotionConfig
from vim_motion.engine import MotionEngine
from vim_motion.motion import (
    DEFAULT_MOTIONS,
    WORD_CLASSIFIER,
    BoundaryClassifier,
    MotionConflictError,
    MotionRef,
    MotionRegistry,
    UnknownMotionError,
    load_default_motions,
)

from motion_helpers import at, make_document


def make_engine(*lines: str, config: MotionConfig | None = None) -> MotionEngine:
    return MotionEngine(make_document(*lines), config=config)


def test_default_registry_contains_builtin_motions() -> None:
    engine = make_engine("foo")

    assert engine.registry.ids() == tuple(motion.id for motion in DEFAULT_MOTIONS)
    assert "paragraph_end" in engine.registry
    assert len(engine.registry) == 17


def test_apply_matches_named_method() -> None:
    engine = make_engine("foo bar baz")

    assert engine.apply("word_right", at(0, 0)) == engine.word_right(at(0, 0))
    assert engine.word_right(at(0, 0)) == at(0, 4)


def test_count_repeats_motion() -> None:
    engine = make_engine("foo bar baz")

    assert engine.word_right(at(0, 0), count=2) == at(0, 8)
    assert engine.word_left(at(0, 8), count=2) == at(0, 0)


def test_vertical_count_keeps_starting_column() -> None:
    engine = make_engine("abcdef", "ab", "abcdef")

    assert engine.down(at(0, 5), count=2) == at(2, 5)
    assert engine.up(at(2, 5), count=2) == at(0, 5)


def test_vertical_explicit_desired_column() -> None:
    engine = make_engine("abcdef", "ab", "abcdef")

    assert engine.down(at(1, 1), 4) == at(2, 4)


def test_line_and_document_edges() -> None:
    engine = make_engine("   foo", "   ", "xy")

    assert engine.first_non_blank(at(0, 5)) == at(0, 3)
    assert engine.first_non_blank(at(1, 0)) == at(1, 2)
    assert engine.line_begin(at(0, 5)) == at(0, 0)
    assert engine.line_end(at(0, 0)) == at(0, 5)
    assert engine.document_begin(at(2, 1)) == at(0, 0)
    assert engine.document_end(at(0, 0)) == at(2, 1)


def test_big_word_and_paragraph_dispatch() -> None:
    engine = make_engine("foo.bar baz", "", "qux")

    assert engine.big_word_right(at(0, 0)) == at(0, 8)
    assert engine.big_word_end(at(0, 0)) == at(0, 6)
    assert engine.big_word_left(at(0, 8)) == at(0, 0)
    assert engine.word_end(at(0, 0)) == at(0, 2)
    assert engine.paragraph_end(at(0, 0)) == at(1, 0)
    assert engine.paragraph_begin(at(2, 0)) == at(1, 0)


def test_unknown_motion_raises() -> None:
    engine = make_engine("foo")

    with pytest.raises(UnknownMotionError) as info:
        engine.apply("teleport", at(0, 0))

    assert isinstance(info.value, KeyError)
    assert "teleport" in str(info.value)


def test_count_must_be_positive() -> None:
    engine = make_engine("foo")

    with pytest.raises(ValueError):
        engine.right(at(0, 0), count=0)


def test_default_config_shares_word_classifier() -> None:
    engine = make_engine("foo")

    assert engine.word_classifier is WORD_CLASSIFIER


def test_custom_punctuation_changes_word_motion() -> None:
    engine = make_engine("a.b-c", config=MotionConfig(word_punctuation="-"))

    assert engine.word_right(at(0, 0)) == at(0, 3)
    assert engine.big_word_right(at(0, 0)) == at(0, 4)


def test_with_source_reuses_classifiers() -> None:
    engine = make_engine("a.b-c", config=MotionConfig(word_punctuation="-"))

    rebound = engine.with_source(make_document("x-y"))

    assert rebound.word_classifier is engine.word_classifier
    assert rebound.registry is engine.registry
    assert rebound.word_right(at(0, 0)) == at(0, 1)


def test_registry_rejects_duplicates_unless_replaced() -> None:
    registry = load_default_motions(MotionRegistry())
    custom = MotionRef("left", lambda engine, position: position.line_begin())

    with pytest.raises(MotionConflictError):
        registry.register(custom)

    registry.register(custom, replace=True)
    engine = MotionEngine(make_document("foo"), registry=registry)

    assert engine.left(at(0, 2)) == at(0, 0)


def test_load_default_motions_include_filter() -> None:
    registry = load_default_motions(MotionRegistry(), include=("left", "right"))

    assert registry.ids() == ("left", "right")
    assert registry.unregister("left") is not None
    assert registry.unregister("left") is None


def test_motion_ref_validation() -> None:
    with pytest.raises(ValueError):
        MotionRef("", lambda engine, position: position)
    with pytest.raises(TypeError):
        MotionRef("x", "not callable")  # type: ignore[arg-type]


def test_config_from_env() -> None:
    assert MotionConfig.from_env({}).word_punctuation == MotionConfig().word_punctuation
    config = MotionConfig.from_env({"VIM_MOTION_WORD_PUNCTUATION": "--."})

    assert config.word_punctuation == "-."


def test_config_rejects_whitespace() -> None:
    with pytest.raises(ValueError):
        MotionConfig(word_punctuation="- ")


def test_config_and_classifier_normalize_punctuation_alike() -> None:
    raw = "..--//"

    assert MotionConfig(word_punctuation=raw).word_punctuation == (
        BoundaryClassifier(raw).punctuation
    )
