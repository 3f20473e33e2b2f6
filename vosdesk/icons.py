"""Desktop icons: directory listing, layout, hit testing and drawing."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import pygame

ICON_SIZE = 48
STEP = 70
DESK_WIDTH = 640
DESK_HEIGHT = 480
MARGIN = 10
LABEL_GAP = 4

DIR_COLOR = (80, 80, 200)
FILE_COLOR = (160, 80, 200)
LABEL_COLOR = (255, 255, 255)


@dataclass
class Icon:
    """One directory entry shown as a square with a label below it."""

    name: str
    is_dir: bool
    rect: pygame.Rect = field(
        default_factory=lambda: pygame.Rect(0, 0, ICON_SIZE, ICON_SIZE)
    )


def inside(px, py, rect):
    """Return True if the point lies in the rectangle, edges included."""
    return rect.x <= px <= rect.x + rect.w and rect.y <= py <= rect.y + rect.h


def _desktop_max_x():
    return DESK_WIDTH - 20


def load_icons(path):
    """List the entries of a directory as icons laid out on the desktop grid.

    Raises OSError if the directory cannot be read.
    """
    icons = []
    x, y = MARGIN, MARGIN
    with os.scandir(path) as entries:
        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False
            icons.append(
                Icon(entry.name, is_dir, pygame.Rect(x, y, ICON_SIZE, ICON_SIZE))
            )
            x += STEP
            if x > _desktop_max_x():
                x = MARGIN
                y += STEP
    return icons


def draw_icon(surface, font, icon):
    """Draw an icon square and its name underneath."""
    surface.fill(DIR_COLOR if icon.is_dir else FILE_COLOR, icon.rect)
    label = font.render(icon.name, False, LABEL_COLOR)
    if label is not None:
        surface.blit(label, (icon.rect.x, icon.rect.y + ICON_SIZE + LABEL_GAP))