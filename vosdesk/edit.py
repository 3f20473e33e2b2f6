"""Read-only text viewer windows with scroll bars."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from .icons import inside
from .window import BORDER, TITLEBAR_H, Window, event_position

PAD = 10
SCROLL_SIZE = 12
MIN_SLIDER = 20
WHEEL_LINES = 3

TEXT_COLOR = (255, 255, 255)
TRACK_COLOR = (80, 80, 80)
SLIDER_COLOR = (200, 200, 200)


def _cdiv(a, b):
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def read_lines(path):
    """Return the lines of a text file without their line endings."""
    with open(path, encoding="utf-8", errors="replace", newline=None) as fh:
        return [line.rstrip("\n") for line in fh]


@dataclass
class _Geometry:
    view: pygame.Rect
    max_x: int
    max_y: int
    vbar: pygame.Rect
    hbar: pygame.Rect
    vslider: pygame.Rect
    hslider: pygame.Rect


@dataclass(eq=False)
class Editor(Window):
    """A window that shows a text file with pixel scrolling."""

    lines: list = field(default_factory=list)
    line_height: int = 0
    max_width: int = 0
    scroll_x: int = 0
    scroll_y: int = 0
    v_dragging: bool = False
    h_dragging: bool = False
    drag_off: int = 0

    @classmethod
    def from_file(cls, path, x, y, width, height, font):
        """Open a text file in a new editor; raises OSError if unreadable."""
        lines = read_lines(path)
        max_width = max((font.size(line)[0] for line in lines), default=0)
        return cls(
            str(path), x, y, width, height,
            lines=lines, line_height=font.get_height(), max_width=max_width,
        )

    def _view(self):
        return pygame.Rect(
            self.x + PAD,
            self.y + TITLEBAR_H + PAD,
            self.width - SCROLL_SIZE - 2 * PAD,
            self.height - SCROLL_SIZE - TITLEBAR_H - 2 * PAD,
        )

    def _geometry(self):
        view = self._view()
        max_x = self.max_width - view.w
        max_y = self.line_height * len(self.lines) - view.h
        vbar = pygame.Rect(
            self.x + self.width - SCROLL_SIZE - BORDER,
            self.y + TITLEBAR_H,
            SCROLL_SIZE,
            self.height - TITLEBAR_H - SCROLL_SIZE,
        )
        hbar = pygame.Rect(
            self.x + PAD,
            self.y + self.height - SCROLL_SIZE - BORDER,
            self.width - SCROLL_SIZE - 2 * PAD,
            SCROLL_SIZE,
        )
        vsz = vbar.h if max_y <= 0 else _cdiv(view.h * vbar.h, view.h + max_y)
        vsz = max(vsz, MIN_SLIDER)
        vpos = 0 if max_y <= 0 else _cdiv(self.scroll_y * (vbar.h - vsz), max_y)
        hsz = hbar.w if max_x <= 0 else _cdiv(view.w * hbar.w, view.w + max_x)
        hsz = max(hsz, MIN_SLIDER)
        hpos = 0 if max_x <= 0 else _cdiv(self.scroll_x * (hbar.w - hsz), max_x)
        return _Geometry(
            view, max_x, max_y, vbar, hbar,
            pygame.Rect(vbar.x, vbar.y + vpos, SCROLL_SIZE, vsz),
            pygame.Rect(hbar.x + hpos, hbar.y, hsz, SCROLL_SIZE),
        )

    def clamp_scroll(self):
        """Keep the scroll offsets within the text's extent."""
        view = self._view()
        max_x = max(0, self.max_width - view.w)
        max_y = max(0, self.line_height * len(self.lines) - view.h)
        self.scroll_x = min(max(self.scroll_x, 0), max_x)
        self.scroll_y = min(max(self.scroll_y, 0), max_y)

    def handle_event(self, event):
        """Handle window chrome and scrolling; True only if it scrolled."""
        if not self.visible:
            return False
        super().handle_event(event)
        pos = event_position(event)
        if pos is None:
            return False
        mx, my = pos
        g = self._geometry()

        if event.type == pygame.MOUSEWHEEL and inside(mx, my, g.view):
            self.scroll_y -= event.y * self.line_height * WHEEL_LINES
            self.clamp_scroll()
            return True

        left = getattr(event, "button", None) == pygame.BUTTON_LEFT
        if event.type == pygame.MOUSEBUTTONDOWN and left:
            if inside(mx, my, g.vslider):
                self.v_dragging = True
                self.drag_off = my - g.vslider.y
                return True
            if inside(mx, my, g.hslider):
                self.h_dragging = True
                self.drag_off = mx - g.hslider.x
                return True
        if event.type == pygame.MOUSEBUTTONUP and left:
            self.v_dragging = self.h_dragging = False

        if event.type == pygame.MOUSEMOTION:
            travel_y = g.vbar.h - g.vslider.h
            if self.v_dragging and g.max_y > 0 and travel_y > 0:
                new_y = min(max(my - self.drag_off - g.vbar.y, 0), travel_y)
                self.scroll_y = _cdiv(new_y * g.max_y, travel_y)
                self.clamp_scroll()
                return True
            travel_x = g.hbar.w - g.hslider.w
            if self.h_dragging and g.max_x > 0 and travel_x > 0:
                new_x = min(max(mx - self.drag_off - g.hbar.x, 0), travel_x)
                self.scroll_x = _cdiv(new_x * g.max_x, travel_x)
                self.clamp_scroll()
                return True
        return False

    def draw(self, surface, font):
        """Draw the frame, the visible lines and the scroll bars."""
        if not self.visible:
            return
        super().draw(surface, font)
        g = self._geometry()
        view = g.view

        previous_clip = surface.get_clip()
        surface.set_clip(view)
        if self.line_height > 0:
            first = self.scroll_y // self.line_height
            yoff = -(self.scroll_y % self.line_height)
            for offset, line in enumerate(self.lines[first:]):
                y = view.y + yoff + offset * self.line_height
                if y > view.y + view.h:
                    break
                if not line:
                    continue
                text = font.render(line, False, TEXT_COLOR)
                surface.blit(text, (view.x - self.scroll_x, y))
        surface.set_clip(previous_clip)

        surface.fill(TRACK_COLOR, g.vbar)
        surface.fill(TRACK_COLOR, g.hbar)
        surface.fill(SLIDER_COLOR, g.vslider)
        surface.fill(SLIDER_COLOR, g.hslider)