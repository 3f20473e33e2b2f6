import pygame
import pytest

from vosdesk.icons import (
    DESK_WIDTH,
    ICON_SIZE,
    STEP,
    Icon,
    draw_icon,
    inside,
    load_icons,
)


class FakeFont:
    def size(self, text):
        return (len(text) * 7, 14)

    def get_height(self):
        return 14

    def render(self, text, antialias, color, background=None):
        surf = pygame.Surface((max(1, len(text) * 7), 14))
        surf.fill(color)
        return surf


def test_inside_includes_edges():
    r = pygame.Rect(10, 20, 30, 40)
    assert inside(10, 20, r)
    assert inside(40, 60, r)
    assert not inside(41, 60, r)
    assert not inside(10, 19, r)


def test_load_icons_lists_entries(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.txt").write_text("x")
    icons = load_icons(tmp_path)
    by_name = {icon.name: icon for icon in icons}
    assert set(by_name) == {"sub", "a.txt"}
    assert by_name["sub"].is_dir is True
    assert by_name["a.txt"].is_dir is False


def test_load_icons_first_position(tmp_path):
    (tmp_path / "only").write_text("")
    (icon,) = load_icons(tmp_path)
    assert icon.rect == pygame.Rect(10, 10, ICON_SIZE, ICON_SIZE)


def test_load_icons_grid_wraps(tmp_path):
    for i in range(25):
        (tmp_path / f"f{i}").write_text("")
    icons = load_icons(tmp_path)
    assert len(icons) == 25
    assert all(icon.rect.x <= DESK_WIDTH - 20 for icon in icons)
    for prev, cur in zip(icons, icons[1:]):
        if cur.rect.y == prev.rect.y:
            assert cur.rect.x == prev.rect.x + STEP
        else:
            assert cur.rect.y == prev.rect.y + STEP
            assert cur.rect.x == icons[0].rect.x
    assert icons[-1].rect.y > icons[0].rect.y


def test_load_icons_missing_directory(tmp_path):
    with pytest.raises(OSError):
        load_icons(tmp_path / "missing")


@pytest.mark.parametrize("is_dir, color", [(True, (80, 80, 200)), (False, (160, 80, 200))])
def test_draw_icon_colors(is_dir, color):
    surface = pygame.Surface((200, 200))
    icon = Icon("n", is_dir, pygame.Rect(20, 20, ICON_SIZE, ICON_SIZE))
    draw_icon(surface, FakeFont(), icon)
    assert tuple(surface.get_at((40, 40)))[:3] == color


def test_draw_icon_label_below():
    surface = pygame.Surface((200, 200))
    icon = Icon("name", False, pygame.Rect(20, 20, ICON_SIZE, ICON_SIZE))
    draw_icon(surface, FakeFont(), icon)
    assert tuple(surface.get_at((21, 20 + ICON_SIZE + 6)))[:3] == (255, 255, 255)