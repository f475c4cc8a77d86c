"""Editor for message header themes: template pages, desktop file and session."""

__version__ = "0.1.0"