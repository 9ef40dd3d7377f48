import itertools

import pytest

from consolog.levels import LogLevel, LogLevelOperator, should_emit

REAL_LEVELS = [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR, LogLevel.FATAL]


@pytest.mark.parametrize("level,threshold", list(itertools.product(REAL_LEVELS, REAL_LEVELS)))
def test_operator_matrix(level, threshold):
    assert should_emit(level, threshold, LogLevelOperator.GREATER_OR_EQUAL, True, True) == (level >= threshold)
    assert should_emit(level, threshold, LogLevelOperator.EQUAL, True, True) == (level == threshold)
    assert should_emit(level, threshold, LogLevelOperator.LESS_OR_EQUAL, True, True) == (level <= threshold)


def test_none_never_matches():
    for op in LogLevelOperator:
        assert not should_emit(LogLevel.NONE, LogLevel.DEBUG, op, True, True)
        assert not should_emit(LogLevel.ERROR, LogLevel.NONE, op, True, True)
    # NONE <= DEBUG numerically, but NONE is still never emitted
    assert not should_emit(LogLevel.NONE, LogLevel.FATAL, LogLevelOperator.LESS_OR_EQUAL, True, True)


def test_disabled_instance_or_gate_blocks_everything():
    assert not should_emit(LogLevel.FATAL, LogLevel.DEBUG, LogLevelOperator.GREATER_OR_EQUAL, False, True)
    assert not should_emit(LogLevel.FATAL, LogLevel.DEBUG, LogLevelOperator.GREATER_OR_EQUAL, True, False)


def test_level_ordering():
    assert LogLevel.NONE < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR < LogLevel.FATAL
    assert int(LogLevel.NONE) == -1 and int(LogLevel.FATAL) == 4


@pytest.mark.parametrize(
    "text,expected",
    [
        ("warn", LogLevel.WARN),
        ("WARNING", LogLevel.WARN),
        (" Error ", LogLevel.ERROR),
        ("critical", LogLevel.FATAL),
        ("off", LogLevel.NONE),
        ("2", LogLevel.WARN),
        ("-1", LogLevel.NONE),
        (3, LogLevel.ERROR),
        (LogLevel.INFO, LogLevel.INFO),
    ],
)
def test_level_parse(text, expected):
    assert LogLevel.parse(text) is expected


def test_level_parse_rejects_unknown():
    with pytest.raises(ValueError):
        LogLevel.parse("loud")


def test_operator_parse():
    assert LogLevelOperator.parse(">=") is LogLevelOperator.GREATER_OR_EQUAL
    assert LogLevelOperator.parse("==") is LogLevelOperator.EQUAL
    assert LogLevelOperator.parse("less_or_equal") is LogLevelOperator.LESS_OR_EQUAL
    with pytest.raises(ValueError):
        LogLevelOperator.parse("!=")
