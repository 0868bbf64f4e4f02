"""tt: git helper with AI-assisted commit messages."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("tt-git")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
