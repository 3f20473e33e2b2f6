"""A tiny full-screen desktop: folder windows, a read-only text viewer and program launching."""

__version__ = "0.1.0"