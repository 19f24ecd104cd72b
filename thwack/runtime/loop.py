"""Interactive finder session.

One single-threaded loop owns the query, the candidate list, and the
terminal. Input is polled with a bounded wait; typing only marks the query
as changed, and the search runs once input goes idle so bursts of
keystrokes coalesce into one walk. Every search re-walks and re-scores the
whole tree. The terminal is restored on every exit path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..clipboard import Clipboard
from ..errors import ClipboardError
from ..preferences import Preferences, StatusLine
from ..query import Query
from ..render.ansi import ENTER_ALTERNATE_SCREEN, LEAVE_ALTERNATE_SCREEN, RESET
from ..render.screen import ScreenContext, render_frame, visible_capacity
from ..search.candidates import CandidateList
from ..search.walker import Walker
from ..terminal import Terminal
from .events import Action, action_for_key

POLL_TIMEOUT_SECONDS = 0.3


class State(Enum):
    READY = "ready"
    QUERY_CHANGED = "query_changed"
    PATHS_CHANGED = "paths_changed"
    SELECTION_CHANGED = "selection_changed"


@dataclass(frozen=True)
class Invoke:
    """Terminal state carrying the path chosen with Enter."""

    path: str


class Session:
    """Run the finder until the user picks, copies, or quits."""

    def __init__(
        self,
        preferences: Preferences,
        starting_point: str,
        terminal: Terminal,
        walker: Walker,
        logger: logging.Logger,
        clipboard: Clipboard | None = None,
        poll_timeout: float = POLL_TIMEOUT_SECONDS,
    ) -> None:
        self.preferences = preferences
        self.starting_point = starting_point
        self.terminal = terminal
        self.walker = walker
        self.logger = logger
        self.clipboard = clipboard
        self.poll_timeout = poll_timeout
        self.query = Query(preferences.query)
        self.candidates = CandidateList()
        self.state: State | Invoke = State.QUERY_CHANGED
        self.dirty = True

    def run(self) -> str | None:
        """Drive the session; return the path to invoke, if any."""
        try:
            self.terminal.write(ENTER_ALTERNATE_SCREEN + RESET)
            self.terminal.flush()
            self.terminal.enable_raw_mode()
            self._loop()
        finally:
            self._leave_terminal()
        if isinstance(self.state, Invoke):
            return self.state.path
        return None

    def _loop(self) -> None:
        self.search()
        while True:
            if self.dirty:
                self.render()
            if not self.terminal.poll(self.poll_timeout):
                if self.state is State.QUERY_CHANGED:
                    self.search()
                continue
            key = self.terminal.read_event()
            self.logger.debug("event=%r, query=%s", key, self.query)
            if self.handle(action_for_key(key), key):
                break

    def handle(self, action: Action, key: str = "") -> bool:
        """Apply one action; return ``True`` when the loop should end."""
        if action is Action.QUIT:
            return True
        if action is Action.QUERY_PUSH:
            self.query.push(key)
            self._mark(State.QUERY_CHANGED)
        elif action is Action.QUERY_POP:
            self.query.pop()
            self._mark(State.QUERY_CHANGED)
        elif action is Action.UP:
            self._flush_pending_search()
            self.candidates.move_up()
            self._mark(State.SELECTION_CHANGED)
        elif action is Action.DOWN:
            self._flush_pending_search()
            self.candidates.move_down()
            self._mark(State.SELECTION_CHANGED)
        elif action is Action.LEFT:
            self.query.move_left()
            self.dirty = True
        elif action is Action.RIGHT:
            self.query.move_right()
            self.dirty = True
        elif action is Action.INVOKE:
            return self._invoke()
        elif action in (Action.COPY_ABSOLUTE_PATH, Action.COPY_RELATIVE_PATH):
            self._copy(absolute=action is Action.COPY_ABSOLUTE_PATH)
            return True
        elif action is Action.RESIZE:
            self.search()
        return False

    def _mark(self, state: State) -> None:
        self.state = state
        self.dirty = True

    def _flush_pending_search(self) -> None:
        # Selection-based actions never act on a list from an older query.
        if self.state is State.QUERY_CHANGED:
            self.search()

    def search(self) -> None:
        """Rebuild candidates for the current query and terminal size."""
        _columns, rows = self.terminal.size()
        capacity = visible_capacity(rows, self.preferences.status_line)
        self.candidates = CandidateList.build(
            self.starting_point,
            str(self.query),
            capacity,
            self.walker,
        )
        self.logger.debug("query=%s matched=%d capacity=%d", self.query, len(self.candidates), capacity)
        self.state = State.PATHS_CHANGED
        self.dirty = True

    def _invoke(self) -> bool:
        self._flush_pending_search()
        selected = self.candidates.selected()
        if selected is None:
            return False
        if self.preferences.status_line is StatusLine.RELATIVE:
            path = selected.relative
        else:
            path = selected.absolute
        self.state = Invoke(path)
        return True

    def _copy(self, absolute: bool) -> None:
        if self.clipboard is None:
            self.logger.info("Clipboard is unavailable; nothing copied")
            return
        self._flush_pending_search()
        selected = self.candidates.selected()
        if selected is None:
            return
        text = selected.absolute if absolute else selected.relative
        try:
            self.clipboard.set_contents(text)
        except ClipboardError as exc:
            self.logger.error("%s", exc)
            return
        self.logger.info("Copied %s to the clipboard", text)

    def render(self) -> None:
        columns, rows = self.terminal.size()
        frame = render_frame(
            ScreenContext(
                columns=columns,
                rows=rows,
                query=self.query,
                candidates=self.candidates,
                status_line=self.preferences.status_line,
            )
        )
        self.terminal.write(frame)
        self.terminal.flush()
        self.dirty = False
        if self.state in (State.PATHS_CHANGED, State.SELECTION_CHANGED):
            self.state = State.READY

    def _leave_terminal(self) -> None:
        try:
            self.terminal.write(LEAVE_ALTERNATE_SCREEN)
            self.terminal.flush()
        finally:
            self.terminal.disable_raw_mode()
        self.logger.debug("Terminal left")
