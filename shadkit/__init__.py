"""Tailwind-styled UI components rendered to HTML, with state helpers and a demo gallery."""

__version__ = "0.1.0"