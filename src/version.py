"""Service version that is read by project manager tools."""

__version__ = "0.1.0"
