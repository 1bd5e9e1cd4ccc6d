"""Client for the GNOME Shell extensions website: search, extension info, comments and images."""

__version__ = "0.6.3"