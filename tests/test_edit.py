import pygame
import pytest

from vosdesk.edit import Editor, read_lines


class FakeFont:
    def size(self, text):
        return (len(text) * 7, 14)

    def get_height(self):
        return 14

    def render(self, text, antialias, color, background=None):
        surf = pygame.Surface((max(1, len(text) * 7), 14))
        surf.fill(color)
        return surf


def down(x, y):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(x, y))


def up(x, y):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=pygame.BUTTON_LEFT, pos=(x, y))


def motion(x, y):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y), rel=(0, 0), buttons=(1, 0, 0))


def wheel(dy, pos):
    return pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=dy, pos=pos)


@pytest.fixture
def long_file(tmp_path):
    path = tmp_path / "long.txt"
    path.write_text("".join(f"line {i} " + "x" * (i % 80) + "\n" for i in range(100)))
    return path


@pytest.fixture
def short_file(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("alpha\nbeta\n")
    return path


def test_read_lines_strips_newlines(short_file):
    assert read_lines(short_file) == ["alpha", "beta"]


def test_read_lines_last_line_without_newline(tmp_path):
    path = tmp_path / "t.txt"
    path.write_text("a\nb")
    assert read_lines(path) == ["a", "b"]


def test_read_lines_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.txt")


def test_from_file_metrics(short_file):
    font = FakeFont()
    ed = Editor.from_file(short_file, 0, 0, 380, 260, font)
    assert ed.lines == ["alpha", "beta"]
    assert ed.line_height == font.get_height()
    assert ed.max_width == font.size("alpha")[0]
    assert ed.path == str(short_file)
    assert (ed.scroll_x, ed.scroll_y) == (0, 0)


def test_from_file_missing(tmp_path):
    with pytest.raises(OSError):
        Editor.from_file(tmp_path / "nope.txt", 0, 0, 380, 260, FakeFont())


def test_clamp_scroll_bounds(long_file):
    ed = Editor.from_file(long_file, 0, 0, 380, 260, FakeFont())
    ed.scroll_y = -50
    ed.scroll_x = -5
    ed.clamp_scroll()
    assert (ed.scroll_x, ed.scroll_y) == (0, 0)
    ed.scroll_y = 10**6
    ed.clamp_scroll()
    limit = ed.scroll_y
    assert 0 < limit < ed.line_height * len(ed.lines)


def test_clamp_short_file_stays_zero(short_file):
    ed = Editor.from_file(short_file, 0, 0, 380, 260, FakeFont())
    ed.scroll_y = 500
    ed.scroll_x = 500
    ed.clamp_scroll()
    assert (ed.scroll_x, ed.scroll_y) == (0, 0)


def test_wheel_scrolls_inside_view(long_file):
    ed = Editor.from_file(long_file, 0, 0, 380, 260, FakeFont())
    assert ed.handle_event(wheel(-1, (100, 100))) is True
    assert ed.scroll_y == ed.line_height * 3
    assert ed.handle_event(wheel(1, (100, 100))) is True
    assert ed.scroll_y == 0


def test_wheel_outside_view_ignored(long_file):
    ed = Editor.from_file(long_file, 0, 0, 380, 260, FakeFont())
    assert ed.handle_event(wheel(-1, (600, 400))) is False
    assert ed.scroll_y == 0


def test_vertical_slider_drag_reaches_end(long_file):
    ed = Editor.from_file(long_file, 0, 0, 380, 260, FakeFont())
    vbar_x = ed.x + ed.width - 12 - 4 + 6
    assert ed.handle_event(down(vbar_x, 40)) is True
    assert ed.v_dragging
    assert ed.handle_event(motion(vbar_x, 1000)) is True
    reached = ed.scroll_y
    ed.scroll_y = 10**6
    ed.clamp_scroll()
    assert reached == ed.scroll_y
    ed.handle_event(up(vbar_x, 1000))
    assert not ed.v_dragging
    assert ed.handle_event(motion(vbar_x, 40)) is False
    assert ed.scroll_y == reached


def test_close_hides_but_not_reported(short_file):
    ed = Editor.from_file(short_file, 0, 0, 380, 260, FakeFont())
    assert ed.handle_event(down(*ed.close_rect().center)) is False
    assert ed.visible is False


def test_key_event_ignored(short_file):
    ed = Editor.from_file(short_file, 0, 0, 380, 260, FakeFont())
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)
    assert ed.handle_event(event) is False


def test_draw_scrollbars_and_text(short_file):
    ed = Editor.from_file(short_file, 0, 0, 380, 260, FakeFont())
    surface = pygame.Surface((640, 480))
    ed.draw(surface, FakeFont())
    vbar_center = (ed.x + ed.width - 12 - 4 + 6, 100)
    assert tuple(surface.get_at(vbar_center))[:3] == (200, 200, 200)
    assert tuple(surface.get_at((ed.x + 12, ed.y + 30 + 10 + 2)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((200, 150)))[:3] == (60, 60, 220)


def test_draw_track_visible_when_scrollable(long_file):
    ed = Editor.from_file(long_file, 0, 0, 380, 260, FakeFont())
    surface = pygame.Surface((640, 480))
    ed.draw(surface, FakeFont())
    vbar_x = ed.x + ed.width - 12 - 4 + 6
    assert tuple(surface.get_at((vbar_x, 200)))[:3] == (80, 80, 80)
    assert tuple(surface.get_at((vbar_x, 35)))[:3] == (200, 200, 200)