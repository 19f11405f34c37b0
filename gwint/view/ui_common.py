# gwint/view/ui_common.py
"""
Minimal UI shim used by the console runner.
- ui_print -> print, ui_input -> input.
- Tests can monkey-patch ui_input / ui_print or feed a ScriptedInput.
"""

from typing import Any, Iterable


def ui_print(*args: Any, **kwargs: Any) -> None:
    print(*args, **kwargs)


def ui_input(prompt: str = "") -> str:
    """Default CLI input. Monkey-patch this for scripted sessions."""
    return input(prompt)


# Tiny tool for scripted input (handy for tests)
class ScriptedInput:
    """
    Callable that returns pre-seeded responses, then a fallback (default 'q').
    Example:
        ui_common.ui_input = ScriptedInput(["a 1 m 5", "q"])
    """

    def __init__(self, responses: Iterable[str], fallback: str = "q"):
        self._it = iter(responses)
        self._fallback = fallback

    def __call__(self, prompt: str = "") -> str:
        try:
            return next(self._it)
        except StopIteration:
            return self._fallback
