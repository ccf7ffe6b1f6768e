"""Tiny terminal UI helpers (prompt_toolkit-based).

Kept apart from the CLI commands so the prompts can be driven from tests with
a pipe input.
"""

from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.validation import ValidationError, Validator

_YES = {"y", "yes"}
_NO = {"n", "no"}


class _YesNoValidator(Validator):
    def validate(self, document) -> None:
        text = document.text.strip().lower()
        if text and text not in _YES | _NO:
            raise ValidationError(message="Please answer 'y' or 'n'")


def confirm(
    message: str,
    *,
    default: bool = False,
    session: PromptSession | None = None,
) -> bool:
    """Ask a yes/no question; Enter on an empty line picks ``default``.

    Esc or Ctrl+C answer "no".
    """

    kb = KeyBindings()

    @kb.add("escape")
    def _(event) -> None:  # pragma: no cover - exercised indirectly
        event.app.exit(result="n")

    @kb.add("c-c", eager=True)
    def _(event) -> None:  # pragma: no cover - exercised indirectly
        event.app.exit(result="n")

    if session is None:
        sess: PromptSession = PromptSession(key_bindings=kb)
    else:
        sess = PromptSession(
            input=getattr(session, "input", None),
            output=getattr(session, "output", None),
            key_bindings=kb,
        )

    suffix = " [Y/n] " if default else " [y/N] "
    answer = sess.prompt(
        message.rstrip() + suffix,
        validator=_YesNoValidator(),
        validate_while_typing=False,
        key_bindings=kb,
    )
    text = (answer or "").strip().lower()
    if not text:
        return default
    return text in _YES


__all__ = ["confirm"]
