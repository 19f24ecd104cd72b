"""Translate key tokens into finder actions."""

from __future__ import annotations

import unicodedata
from enum import Enum

from ..terminal import RESIZE


class Action(Enum):
    QUIT = "quit"
    QUERY_PUSH = "query_push"
    QUERY_POP = "query_pop"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    INVOKE = "invoke"
    COPY_ABSOLUTE_PATH = "copy_absolute_path"
    COPY_RELATIVE_PATH = "copy_relative_path"
    RESIZE = "resize"
    NONE = "none"


KEY_ACTIONS: dict[str, Action] = {
    "CTRL_C": Action.QUIT,
    "ESC": Action.QUIT,
    "BACKSPACE": Action.QUERY_POP,
    "UP": Action.UP,
    "CTRL_P": Action.UP,
    "DOWN": Action.DOWN,
    "CTRL_N": Action.DOWN,
    "LEFT": Action.LEFT,
    "RIGHT": Action.RIGHT,
    "ENTER": Action.INVOKE,
    "CTRL_Y": Action.COPY_ABSOLUTE_PATH,
    "CTRL_D": Action.COPY_RELATIVE_PATH,
    RESIZE: Action.RESIZE,
}


def _is_text(key: str) -> bool:
    # Combining marks and joiners count as text; control characters do not.
    return bool(key) and not any(unicodedata.category(ch) == "Cc" for ch in key)


def action_for_key(key: str) -> Action:
    action = KEY_ACTIONS.get(key)
    if action is not None:
        return action
    if _is_text(key):
        return Action.QUERY_PUSH
    return Action.NONE
