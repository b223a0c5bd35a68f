"""Hourglass - Run-time time control settings for game servers.

This package provides the server configuration model and a command tree
for querying and changing its values.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
