"""curses terminal UI for checkit.

The loop is single threaded: draw, block on the next key, dispatch it onto the
AppState, redraw. curses.wrapper restores the terminal on exit, including
when an exception escapes the loop.
"""

from __future__ import annotations

import curses
import logging

from checkit.config import CheckitConfig
from checkit.keys import HELP_LINE, action_for_key, dispatch
from checkit.state import AppState

logger = logging.getLogger(__name__)

COLORS = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}

HIGHLIGHT_PAIR = 1


class ChecklistView:
    """Draws an AppState into a curses window and feeds it key presses."""

    def __init__(
        self,
        stdscr,
        state: AppState,
        config: CheckitConfig | None = None,
        highlight_attr: int = curses.A_REVERSE,
    ) -> None:
        self.stdscr = stdscr
        self.state = state
        self.config = config or CheckitConfig()
        self.highlight_attr = highlight_attr
        self.offset = 0
        self.status = HELP_LINE

    def visible_rows(self, height: int) -> int:
        """Number of task rows that fit inside the box."""
        margin = self.config.display.margin
        status = 1 if self.config.display.show_status else 0
        return max(height - 2 * margin - status - 2, 0)

    def scroll_to_selection(self, visible: int) -> None:
        selected = self.state.selected()
        if selected is None or visible <= 0:
            self.offset = 0
            return
        if selected < self.offset:
            self.offset = selected
        elif selected >= self.offset + visible:
            self.offset = selected - visible + 1

    def status_text(self) -> str:
        done, total = self.state.summary()
        modified = " [modified]" if self.state.dirty else ""
        return f" {done}/{total} done{modified} | {self.status}"

    def draw(self) -> None:
        display = self.config.display
        height, width = self.stdscr.getmaxyx()
        self.stdscr.erase()

        margin = display.margin
        box_h = height - 2 * margin - (1 if display.show_status else 0)
        box_w = width - 2 * margin
        if box_h < 3 or box_w < 4:
            self.stdscr.addnstr(0, 0, "Terminal too small", max(width - 1, 0))
            self.stdscr.refresh()
            return

        box = self.stdscr.derwin(box_h, box_w, margin, margin)
        box.box()
        box.addnstr(0, 2, f" {display.title} ", box_w - 4, curses.A_BOLD)

        visible = box_h - 2
        self.scroll_to_selection(visible)
        selected = self.state.selected()
        rows = self.state.rows()
        for y, index in enumerate(range(self.offset, min(len(rows), self.offset + visible))):
            attrs = self.highlight_attr if index == selected else curses.A_NORMAL
            box.addnstr(y + 1, 1, rows[index], box_w - 2, attrs)

        if display.show_status:
            self.stdscr.addnstr(height - 1, 0, self.status_text(), width - 1, curses.A_DIM)

        self.stdscr.refresh()

    def handle_key(self, key: int) -> bool:
        """Dispatch one key press. Returns False when the loop should stop."""
        action = action_for_key(key)
        if action is None:
            return True

        result = dispatch(self.state, action)
        if result.message:
            self.status = result.message
        return not result.quit

    def run(self) -> None:
        while True:
            self.draw()
            key = self.stdscr.getch()
            if key == curses.KEY_RESIZE:
                continue
            if not self.handle_key(key):
                return


def _highlight_attr(color: str) -> int:
    if not curses.has_colors():
        return curses.A_REVERSE
    curses.start_color()
    try:
        curses.use_default_colors()
    except curses.error:
        logger.debug("Terminal has no default colours, highlighting with reverse video")
        return curses.A_REVERSE
    curses.init_pair(HIGHLIGHT_PAIR, COLORS[color], -1)
    return curses.color_pair(HIGHLIGHT_PAIR) | curses.A_BOLD


def start(state: AppState, config: CheckitConfig | None = None) -> None:
    """Run the interactive UI until the user quits."""
    config = config or CheckitConfig()

    def _main(stdscr) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        stdscr.keypad(True)
        view = ChecklistView(
            stdscr, state, config, highlight_attr=_highlight_attr(config.display.highlight_color)
        )
        logger.debug("Entering terminal UI for %s", state.path)
        view.run()

    curses.wrapper(_main)
