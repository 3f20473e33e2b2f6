"""Folder windows: dragging, resizing, closing and icon grids."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

import pygame

from .icons import ICON_SIZE, STEP, draw_icon, inside, load_icons

TITLEBAR_H = 30
BORDER = 4
CLOSE_SIZE = 18
MIN_W = 120
MIN_H = 80

BODY_COLOR = (60, 60, 220)
TITLE_COLOR = (30, 30, 120)
FRAME_COLOR = (0, 0, 0)
CLOSE_COLOR = (200, 40, 40)


class ResizeEdge(enum.Flag):
    NONE = 0
    RIGHT = 1
    BOTTOM = 2


def event_position(event):
    """Return the mouse position carried by an event, or None."""
    pos = getattr(event, "pos", None)
    if pos is None:
        if event.type == pygame.MOUSEWHEEL:
            return tuple(pygame.mouse.get_pos())
        return None
    return tuple(pos)


def _is_left(event, kind):
    return event.type == kind and getattr(event, "button", None) == pygame.BUTTON_LEFT


def icon_rect(index, columns, win_x, win_y):
    """Rectangle of the index-th icon inside a window's client area."""
    row, col = divmod(index, columns)
    return pygame.Rect(
        win_x + 10 + col * STEP,
        win_y + TITLEBAR_H + 10 + row * STEP,
        ICON_SIZE,
        ICON_SIZE,
    )


@dataclass(eq=False)
class Window:
    """A movable, resizable window showing the contents of a directory."""

    path: str
    x: int
    y: int
    width: int
    height: int
    visible: bool = True
    dragging: bool = False
    drag_off_x: int = 0
    drag_off_y: int = 0
    resizing: bool = False
    resize_dir: ResizeEdge = ResizeEdge.NONE
    resize_off_x: int = 0
    resize_off_y: int = 0

    @property
    def rect(self):
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def close_rect(self):
        return pygame.Rect(
            self.x + self.width - CLOSE_SIZE - BORDER,
            self.y + (TITLEBAR_H - CLOSE_SIZE) // 2,
            CLOSE_SIZE,
            CLOSE_SIZE,
        )

    def columns(self):
        """Number of icon columns that fit in the window, at least one."""
        return max(1, (self.width - 20) // STEP)

    def _press(self, mx, my):
        right = pygame.Rect(self.x + self.width - BORDER, self.y, BORDER, self.height)
        bottom = pygame.Rect(self.x, self.y + self.height - BORDER, self.width, BORDER)
        corner = pygame.Rect(right.x, bottom.y, BORDER, BORDER)
        title = pygame.Rect(self.x, self.y, self.width, TITLEBAR_H)

        if inside(mx, my, corner):
            self.resizing = True
            self.resize_dir = ResizeEdge.RIGHT | ResizeEdge.BOTTOM
            self.resize_off_x = mx - (self.x + self.width)
            self.resize_off_y = my - (self.y + self.height)
        elif inside(mx, my, right):
            self.resizing = True
            self.resize_dir = ResizeEdge.RIGHT
            self.resize_off_x = mx - (self.x + self.width)
        elif inside(mx, my, bottom):
            self.resizing = True
            self.resize_dir = ResizeEdge.BOTTOM
            self.resize_off_y = my - (self.y + self.height)
        elif inside(mx, my, title):
            self.dragging = True
            self.drag_off_x = mx - self.x
            self.drag_off_y = my - self.y

    def _move(self, mx, my):
        if self.dragging:
            self.x = mx - self.drag_off_x
            self.y = my - self.drag_off_y
            return
        if self.resize_dir & ResizeEdge.RIGHT:
            new_w = mx - self.x - self.resize_off_x
            if new_w >= MIN_W:
                self.width = new_w
        if self.resize_dir & ResizeEdge.BOTTOM:
            new_h = my - self.y - self.resize_off_y
            if new_h >= MIN_H:
                self.height = new_h

    def handle_event(self, event, on_icon_click=None):
        """Process one event; return True if the window consumed it.

        on_icon_click(icon, dirpath) is called when an icon in the client
        area is pressed.
        """
        if not self.visible:
            return False
        pos = event_position(event)
        if pos is None:
            return False
        mx, my = pos
        bounds = self.rect
        pressed = _is_left(event, pygame.MOUSEBUTTONDOWN) and inside(mx, my, bounds)
        consumed = False

        if pressed:
            if inside(mx, my, self.close_rect()):
                self.visible = False
                return True
            self._press(mx, my)
            consumed = True

        if _is_left(event, pygame.MOUSEBUTTONUP):
            if self.dragging or self.resizing:
                consumed = True
            self.dragging = self.resizing = False

        if event.type == pygame.MOUSEMOTION and (self.dragging or self.resizing):
            self._move(mx, my)
            consumed = True

        if not inside(mx, my, bounds) and not (self.dragging or self.resizing):
            return consumed

        if pressed and on_icon_click is not None:
            try:
                icons = load_icons(self.path)
            except OSError:
                icons = []
            cols = self.columns()
            for index, icon in enumerate(icons):
                r = icon_rect(index, cols, self.x, self.y)
                if inside(mx, my, r):
                    on_icon_click(replace(icon, rect=r), self.path)
                    consumed = True
                    break
        return consumed

    def draw(self, surface, font):
        """Draw the window frame and the icons of its directory."""
        if not self.visible:
            return
        body = self.rect
        surface.fill(BODY_COLOR, body)
        surface.fill(TITLE_COLOR, pygame.Rect(self.x, self.y, self.width, TITLEBAR_H))
        pygame.draw.rect(surface, FRAME_COLOR, body, 1)
        close = self.close_rect()
        surface.fill(CLOSE_COLOR, close)
        pygame.draw.rect(surface, CLOSE_COLOR, close, 1)

        try:
            icons = load_icons(self.path)
        except OSError:
            return
        cols = self.columns()
        for index, icon in enumerate(icons):
            draw_icon(surface, font, replace(icon, rect=icon_rect(index, cols, self.x, self.y)))