"""Key bindings and action dispatch."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum

from checkit.state import AppState


class Action(Enum):
    """Things a key press can ask for."""

    QUIT = "quit"
    TOGGLE = "toggle"
    SAVE = "save"
    PREVIOUS = "previous"
    NEXT = "next"


KEY_BINDINGS: dict[int, Action] = {
    ord("q"): Action.QUIT,
    ord(" "): Action.TOGGLE,
    ord("\n"): Action.TOGGLE,
    ord("\r"): Action.TOGGLE,
    curses.KEY_ENTER: Action.TOGGLE,
    ord("S"): Action.SAVE,
    ord("k"): Action.PREVIOUS,
    curses.KEY_UP: Action.PREVIOUS,
    ord("j"): Action.NEXT,
    curses.KEY_DOWN: Action.NEXT,
}

HELP_LINE = "j/k move  space toggle  S save  q quit"


@dataclass
class DispatchResult:
    """What the loop should do after an action ran."""

    quit: bool = False
    message: str | None = None


def action_for_key(key: int) -> Action | None:
    """Look up the action bound to a curses key code."""
    return KEY_BINDINGS.get(key)


def dispatch(state: AppState, action: Action) -> DispatchResult:
    """Apply an action to the state."""
    if action is Action.QUIT:
        return DispatchResult(quit=True)
    if action is Action.TOGGLE:
        state.toggle_selected()
    elif action is Action.SAVE:
        return DispatchResult(message=state.persist().message)
    elif action is Action.PREVIOUS:
        state.move_previous()
    elif action is Action.NEXT:
        state.move_next()
    return DispatchResult()
