"""Exception types raised by image_pager."""


class ImagePagerError(Exception):
    """Base class for all image_pager errors."""


class DirectoryError(ImagePagerError, NotADirectoryError):
    """Image folder is missing, not a directory, or cannot be listed."""


class ConfigError(ImagePagerError):
    """Base class for config file problems."""


class ConfigNotFoundError(ConfigError, FileNotFoundError):
    """No config file exists at any searched path."""


class ConfigParseError(ConfigError, ValueError):
    """Config file is not valid YAML or not a YAML mapping."""


class ConfigValidationError(ConfigError, ValueError):
    """Grid section is malformed or holds a non-positive value."""


class NotATerminalError(ImagePagerError, OSError):
    """Stream is not an interactive terminal, so it has no window size."""


class InvalidShapeError(ImagePagerError, ValueError):
    """Grid shape with a page capacity below one reached the paginator."""
