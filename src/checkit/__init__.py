"""checkit - a terminal checklist viewer and editor."""

__version__ = "0.1.0"
