"""The desktop: icons, folder windows and editors, and the main loop."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

import pygame

from .icons import DESK_HEIGHT, DESK_WIDTH, draw_icon, inside, load_icons
from .launcher import Launcher

UI_FONT = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
MONO_FONT = "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf"
FONT_SIZE = 12
BACKGROUND = (20, 20, 20)
FRAME_DELAY_MS = 16


def raise_to_front(items, item):
    """Move item to the end of items, the top of the stacking order."""
    for position, candidate in enumerate(items):
        if candidate is item:
            del items[position]
            items.append(item)
            return


@dataclass
class Desktop:
    """Everything on screen, in stacking order from bottom to top."""

    launcher: Launcher
    icons: list = field(default_factory=list)
    windows: list = field(default_factory=list)
    editors: list = field(default_factory=list)
    root: str = "."
    running: bool = True

    def _open(self, icon, dirpath):
        self.launcher.click(icon, dirpath, self.windows, self.editors)

    def handle_event(self, event):
        """Route one event: editors, then folder windows, then desktop icons.

        Returns True if something took the event.
        """
        if event.type == pygame.QUIT or (
            event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
        ):
            self.running = False

        for editor in reversed(list(self.editors)):
            if editor.handle_event(event):
                raise_to_front(self.editors, editor)
                return True

        for window in reversed(list(self.windows)):
            if window.handle_event(event, self._open):
                raise_to_front(self.windows, window)
                return True

        if (
            event.type == pygame.MOUSEBUTTONDOWN
            and getattr(event, "button", None) == pygame.BUTTON_LEFT
        ):
            mx, my = event.pos
            for icon in self.icons:
                if inside(mx, my, icon.rect):
                    self._open(icon, self.root)
                    return True
        return False

    def purge_closed(self):
        """Drop windows and editors that have been closed."""
        self.editors[:] = [editor for editor in self.editors if editor.visible]
        self.windows[:] = [window for window in self.windows if window.visible]

    def draw(self, surface, font):
        """Draw one frame."""
        surface.fill(BACKGROUND)
        for icon in self.icons:
            draw_icon(surface, font, icon)
        for window in self.windows:
            window.draw(surface, font)
        for editor in self.editors:
            editor.draw(surface, font)


def main(argv=None):
    """Run the desktop full screen until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(
        prog="vosdesk", description="Browse the current directory as a desktop."
    )
    parser.add_argument("--font", default=UI_FONT, help="font for labels")
    parser.add_argument("--mono-font", default=MONO_FONT, help="font for editors")
    args = parser.parse_args(argv)

    try:
        pygame.display.init()
        pygame.font.init()
        screen = pygame.display.set_mode(
            (DESK_WIDTH, DESK_HEIGHT), pygame.FULLSCREEN | pygame.SCALED
        )
    except pygame.error:
        print("display/font init failed", file=sys.stderr)
        pygame.quit()
        return 1

    try:
        pygame.display.set_caption("File Browser")
        try:
            font = pygame.font.Font(args.font, FONT_SIZE)
        except OSError:
            print("font", file=sys.stderr)
            return 1
        try:
            mono = pygame.font.Font(args.mono_font, FONT_SIZE)
        except OSError:
            mono = None
        try:
            icons = load_icons(".")
        except OSError:
            icons = []

        desktop = Desktop(Launcher(font=mono), icons)
        while desktop.running:
            for event in pygame.event.get():
                desktop.handle_event(event)
            desktop.purge_closed()
            desktop.draw(screen, font)
            pygame.display.flip()
            pygame.time.wait(FRAME_DELAY_MS)
    finally:
        pygame.quit()
    return 0