"""Opening desktop entries on double click: folders, programs and text files."""

from __future__ import annotations

import os
import stat
import subprocess
import time

from .edit import Editor
from .icons import DESK_HEIGHT, DESK_WIDTH, STEP, load_icons
from .window import MIN_H, MIN_W, TITLEBAR_H, Window

DOUBLE_CLICK_MS = 400
FOLDER_POS = (120, 120)
EDITOR_POS = (140, 140)
EDITOR_SIZE = (380, 260)


def folder_window_size(count):
    """Width and height of a new folder window holding count icons."""
    cols = max(1, (DESK_WIDTH - 40) // STEP)
    if count < cols:
        cols = count or 1
    rows = -(-count // cols)
    width = min(max(cols * STEP + 20, MIN_W), DESK_WIDTH - 40)
    height = min(max(rows * STEP + TITLEBAR_H + 20, MIN_H), DESK_HEIGHT - 40)
    return width, height


def _milliseconds():
    return time.monotonic() * 1000.0


class Launcher:
    """Tracks clicks on icons and opens an entry on a double click.

    font measures text for new editors; without one, plain files are not
    opened. clock returns the current time in milliseconds and spawn starts
    a program from an argument list.
    """

    def __init__(self, font=None, clock=None, spawn=subprocess.Popen):
        self.font = font
        self.clock = clock if clock is not None else _milliseconds
        self.spawn = spawn
        self._last_ms = None
        self._last_path = ""

    def is_double_click(self, full_path):
        """Record a click on full_path; True if it completes a double click."""
        now = self.clock()
        double = (
            self._last_ms is not None
            and now - self._last_ms < DOUBLE_CLICK_MS
            and full_path == self._last_path
        )
        self._last_ms = now
        self._last_path = full_path
        return double

    def click(self, icon, dirpath, windows, editors):
        """Handle a click on an icon shown for directory dirpath.

        On a double click a folder opens a new window appended to windows,
        an executable file is started, and any other file opens an editor
        appended to editors. Returns what was opened, or None.
        """
        full = os.path.join(dirpath, icon.name)
        if not self.is_double_click(full):
            return None

        if icon.is_dir:
            try:
                count = len(load_icons(full))
            except OSError:
                count = 0
            width, height = folder_window_size(count)
            x, y = FOLDER_POS
            window = Window(full, x, y, width, height)
            windows.append(window)
            return window

        try:
            mode = os.stat(full).st_mode
        except OSError:
            mode = 0
        if mode & stat.S_IXUSR:
            try:
                return self.spawn([full])
            except OSError:
                return None

        if self.font is None:
            return None
        x, y = EDITOR_POS
        width, height = EDITOR_SIZE
        try:
            editor = Editor.from_file(full, x, y, width, height, self.font)
        except OSError:
            return None
        editors.append(editor)
        return editor