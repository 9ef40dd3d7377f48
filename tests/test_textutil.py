from consolog.style import stylize
from consolog.textutil import max_visible_length, pad_trailing, sanitized, visible_length


def test_sanitized_strips_csi_sequences():
    assert sanitized("\x1b[36mhello\x1b[0m") == "hello"
    assert sanitized("\x1b[1;31mbold red\x1b[0m plain") == "bold red plain"
    assert sanitized("\x9b33mx\x9b0m") == "x"
    assert sanitized("no escapes") == "no escapes"


def test_visible_length_of_styled_text_matches_source(monkeypatch):
    monkeypatch.setattr("consolog.style._COLOR_ENABLED", True)
    for role in ("debug", "info", "warn", "error", "timestamp", "context"):
        styled = stylize("Hello, world!", role)
        assert styled != "Hello, world!"
        assert visible_length(styled) == len("Hello, world!")


def test_max_visible_length():
    assert max_visible_length(["[INFO]", "\x1b[31m[ERROR]\x1b[0m", "[WARN]"]) == 7
    assert max_visible_length([]) == 0


def test_pad_trailing_extends_to_visible_width():
    styled = "\x1b[34m[INFO]\x1b[0m"
    padded = pad_trailing(styled, 7)
    assert padded == styled + " "
    assert visible_length(padded) == 7


def test_pad_trailing_never_shortens():
    assert pad_trailing("already long", 3) == "already long"
    assert pad_trailing("exact", 5) == "exact"
