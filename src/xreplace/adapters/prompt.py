"""Interactive yes/no confirmation on the console."""

from __future__ import annotations

import typer

PROMPT_TEXT = "Continue? (y/n):"


def is_confirmation(response: str) -> bool:
    """Return ``True`` when ``response`` starts with ``y`` or ``Y``."""
    return bool(response) and response[0] in "yY"


class ConsoleConfirmationGate:
    """Print a message and read one answer line from standard input.

    Blank input, anything not starting with ``y``/``Y`` and end-of-input all
    count as a decline. There is no re-prompt.
    """

    def confirm(self, message: str) -> bool:
        """Show ``message`` followed by the prompt and return the decision."""
        typer.echo(message)
        try:
            response = typer.prompt(
                PROMPT_TEXT, default="", show_default=False, prompt_suffix=" "
            )
        except typer.Abort:
            return False
        return is_confirmation(response)
