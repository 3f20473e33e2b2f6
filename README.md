# vosdesk

vosdesk is a small full-screen desktop built on pygame. It shows the entries
of the current directory as icons. Folders are drawn in blue and other files
in purple, and each icon has its name below it. Double-clicking an icon does
one of three things:

- A **folder** opens a window that lists its contents as icons. You can
  double-click the icons in that window too.
- An **executable file** (one with the owner's execute bit set) is started as
  a separate program.
- Any **other file** opens in a read-only text viewer. The viewer has
  vertical and horizontal scroll bars that you can drag, and it scrolls three
  lines for each step of the mouse wheel.

Two clicks on the same entry count as a double click when they come less
than 400 ms apart.

You can move a window by dragging its title bar. You can resize it from the
right edge, from the bottom edge or from the corner where they meet. A window
is never made narrower than 120 pixels or lower than 80. The red button in
the title bar closes the window.

Clicking a folder window brings it to the front. A text viewer comes to the
front when it scrolls.

## Installing

```
pip install .
```

This also installs pygame, which vosdesk uses to draw the screen.

## Running

Change to the directory you want to browse, then run:

```
vosdesk
```

The screen is full screen and scaled from a logical size of 640×480. To quit,
press **Escape** or close the display.

Options:

- `--font PATH`: the font used for icon labels. The default is
  `/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf`. If this font cannot be
  loaded, the program stops with exit status 1.
- `--mono-font PATH`: the font used in text viewers. The default is
  `/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf`. If this font cannot
  be loaded, the desktop still runs, but plain files do not open.

## Using it as a library

Each part of the desktop can be imported by itself:

- `vosdesk.icons`: `Icon`, `load_icons(path)`, which lays out a directory's
  entries on the desktop grid and raises `OSError` if the directory cannot be
  read, `inside(px, py, rect)` and `draw_icon(surface, font, icon)`.
- `vosdesk.window`: `Window`, the folder window. It handles dragging,
  resizing and closing through `handle_event(event, on_icon_click)` and
  draws itself with `draw(surface, font)`. The module also provides
  `ResizeEdge`, `icon_rect(...)` and `event_position(event)`.
- `vosdesk.edit`: `Editor`, the scrolling text viewer. Create one with
  `Editor.from_file(path, x, y, width, height, font)`. The module also
  provides `read_lines(path)`.
- `vosdesk.launcher`: `Launcher`, which detects double clicks and opens
  folders, programs and files. You can supply your own clock and spawn
  function. The module also provides `folder_window_size(count)`.
- `vosdesk.app`: `Desktop`, which routes events to editors, then to folder
  windows, then to the desktop icons, removes closed windows and draws the
  screen. The module also provides `raise_to_front(items, item)` and
  `main(argv=None)`.

## What it does not do

- The text viewer only displays files. It cannot edit or save them.
- There are no file operations. You cannot copy, move, rename or delete
  files.
- The desktop always shows the directory vosdesk was started in. It does not
  refresh its own icons while running. Folder windows list their directory
  again every time they are drawn.

## Running the tests

```
pip install .[test]
pytest
```