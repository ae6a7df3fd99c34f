"""maid: clean up and restructure AI-generated Markdown and shell artifacts."""

from .version import __version__

__all__ = ["__version__"]
