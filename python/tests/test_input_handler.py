"""Key mapping tests for the CLI input handler."""

from __future__ import annotations

import pytest

from frontend.cli.input_handler import _resolve


@pytest.mark.parametrize(
    ("ch", "action"),
    [
        ("w", "up"),
        ("D", "right"),
        ("i", "cursor_up"),
        ("l", "cursor_right"),
        (" ", "rotate"),
        ("n", "hint"),
        ("t", "twist"),
        ("\x03", "quit"),
        ("7", "7"),
        ("\x07", ""),
    ],
)
def test_resolve(ch: str, action: str) -> None:
    assert _resolve(ch) == action
