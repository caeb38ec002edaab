"""world-timeline - file-backed content repository for a world history timeline."""

__version__ = "0.1.0"
