"""Unit tests for the console confirmation gate."""

from __future__ import annotations

import pytest
import typer

from xreplace.adapters.prompt import PROMPT_TEXT, ConsoleConfirmationGate, is_confirmation


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        ("y", True),
        ("Y", True),
        ("yes", True),
        ("Yep", True),
        ("", False),
        ("n", False),
        (" y", False),
        ("ok", False),
    ],
)
def test_is_confirmation(response: str, expected: bool) -> None:
    """Only a leading y/Y confirms; blank input declines."""
    assert is_confirmation(response) is expected


def test_gate_prints_message_then_prompts(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """The message is shown before the yes/no prompt is read."""
    prompts: list[str] = []

    def fake_prompt(text: str, **kwargs: object) -> str:
        prompts.append(text)
        assert kwargs["default"] == ""
        return "y"

    monkeypatch.setattr(typer, "prompt", fake_prompt)

    assert ConsoleConfirmationGate().confirm("Target: a.obj") is True
    assert "Target: a.obj" in capsys.readouterr().out
    assert prompts == [PROMPT_TEXT]


def test_gate_treats_end_of_input_as_decline(monkeypatch: pytest.MonkeyPatch) -> None:
    """An aborted prompt (EOF / Ctrl-C) counts as a decline."""

    def fake_prompt(text: str, **kwargs: object) -> str:
        raise typer.Abort()

    monkeypatch.setattr(typer, "prompt", fake_prompt)

    assert ConsoleConfirmationGate().confirm("Target directory: out") is False
