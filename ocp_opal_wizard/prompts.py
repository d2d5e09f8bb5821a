"""Interactive prompt primitives built on ``rich.prompt``.

Validation failures re-prompt in place; Ctrl-C or end-of-input raises
:class:`~ocp_opal_wizard.errors.PromptCancelled` so the calling step can end
the run.
"""

from __future__ import annotations

from typing import Callable

from rich.prompt import Confirm, Prompt

from .errors import PromptCancelled
from .utils import console

Validator = Callable[[str], str | None]
Question = Callable[[dict[str, str]], str]


def ask_text(
    message: str,
    *,
    default: str = "",
    placeholder: str = "",
    validate: Validator | None = None,
) -> str:
    """Ask for a line of text until *validate* accepts it.

    Args:
        message: Question shown to the user.
        default: Value returned when the user just presses Enter.
        placeholder: Hint shown when there is no default.
        validate: Returns an error message for bad input, ``None`` if valid.

    Raises:
        PromptCancelled: If the user hits Ctrl-C or closes stdin.
    """
    prompt = f"[cyan]?[/cyan] [bold]{message}[/bold]"
    if placeholder and not default:
        prompt += f" [dim]({placeholder})[/dim]"

    while True:
        try:
            answer = Prompt.ask(
                prompt,
                console=console,
                default=default,
                show_default=bool(default),
            )
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptCancelled() from exc

        value = answer or ""
        error = validate(value) if validate is not None else None
        if error is None:
            return value
        console.print(f"  [yellow]▲ {error}[/yellow]")


def ask_confirm(message: str, *, default: bool = True) -> bool:
    """Ask a yes/no question."""
    try:
        return Confirm.ask(
            f"[cyan]?[/cyan] [bold]{message}[/bold]",
            console=console,
            default=default,
        )
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptCancelled() from exc


def ask_group(questions: dict[str, Question]) -> dict[str, str]:
    """Ask several related questions and return all answers together.

    Each question receives the answers collected so far, so later defaults
    can depend on earlier ones.  If any question is cancelled the
    ``PromptCancelled`` propagates and no answers are returned.
    """
    results: dict[str, str] = {}
    for key, question in questions.items():
        results[key] = question(results)
    return results
