"""
Yes/no prompts that default to "no".
"""
from __future__ import annotations

import typer

AFFIRMATIVE = "y"


def confirm(question: str) -> bool:
    """
    Ask ``question`` and read one line of input.

    Only the exact answer ``y`` counts as yes. Empty input, anything else,
    end-of-input and Ctrl-C are all treated as no.
    """
    try:
        answer = typer.prompt(
            f"{question} [y/N]",
            default="",
            show_default=False,
            prompt_suffix=" ",
        )
    except typer.Abort:
        typer.echo()
        return False
    return answer.strip() == AFFIRMATIVE
