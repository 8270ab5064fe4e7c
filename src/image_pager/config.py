"""Load the page grid configuration from a YAML file."""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from image_pager.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)

CONFIG_FILENAME = "image-pager.yaml"
GRID_SECTION = "grid"
# Older viewer configs wrote the grid as windowParam: {xParam, yParam}
LEGACY_GRID_SECTION = "windowParam"
LEGACY_FIELDS = {"columns": "xParam", "rows": "yParam"}

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value: object) -> int:
    """Return value if it is a positive int. Raises ConfigValidationError otherwise."""
    # bool is an int subclass; "columns: true" is not a column count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigValidationError(
            f"Grid '{name}' must be a positive integer. Got {value!r}."
        )
    if value <= 0:
        raise ConfigValidationError(
            f"Grid '{name}' must be a positive integer. Got {value}."
        )
    return value


@dataclass(frozen=True)
class GridShape:
    """Number of image columns and rows shown on one page."""

    columns: int
    rows: int

    def __post_init__(self) -> None:
        _check_dimension("columns", self.columns)
        _check_dimension("rows", self.rows)

    @property
    def capacity(self) -> int:
        """Maximum number of images on one page."""
        return self.columns * self.rows

    def __str__(self) -> str:
        return f"{self.columns}x{self.rows}"


DEFAULT_GRID = GridShape(columns=1, rows=1)


def _find_project_root() -> Path:
    """Find project root by looking for pyproject.toml, walking up from cwd."""
    cwd = Path.cwd()
    current = cwd
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return cwd


def _config_paths(override: Path | None) -> list[Path]:
    """Return search order for config file."""
    if override is not None:
        return [Path(override)]
    project_root = _find_project_root()
    return [
        project_root / "conf" / CONFIG_FILENAME,
        Path.home() / ".config" / "image-pager" / CONFIG_FILENAME,
    ]


def _grid_from_section(section: object, section_name: str, fields: dict[str, str]) -> GridShape:
    """Build a GridShape from a grid mapping. Unknown keys are ignored."""
    if not isinstance(section, dict):
        raise ConfigValidationError(
            f"'{section_name}' must be a mapping with "
            f"'{fields['columns']}' and '{fields['rows']}'. "
            f"Got {type(section).__name__}."
        )
    values = {}
    for name, key in fields.items():
        if key not in section or section[key] is None:
            raise ConfigValidationError(
                f"'{section_name}' is missing required field '{key}'."
            )
        values[name] = _check_dimension(key, section[key])
    return GridShape(columns=values["columns"], rows=values["rows"])


def parse_grid(data: object, source: str = "<config>") -> GridShape:
    """Interpret a loaded YAML document as a GridShape.

    An empty document or one without a grid section yields DEFAULT_GRID.

    Raises:
        ConfigParseError: When the document is not a mapping.
        ConfigValidationError: When the grid section is invalid.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Invalid config ({source}): file must contain a YAML mapping."
        )
    if GRID_SECTION in data:
        return _grid_from_section(
            data[GRID_SECTION],
            GRID_SECTION,
            {"columns": "columns", "rows": "rows"},
        )
    if LEGACY_GRID_SECTION in data:
        logger.debug("Reading legacy '%s' section from %s", LEGACY_GRID_SECTION, source)
        return _grid_from_section(data[LEGACY_GRID_SECTION], LEGACY_GRID_SECTION, LEGACY_FIELDS)
    logger.debug("No grid section in %s; using default %s", source, DEFAULT_GRID)
    return DEFAULT_GRID


def load_config(config_path: Path | None = None) -> GridShape:
    """Load the page grid from YAML.

    Args:
        config_path: Optional path to config file. If None, searches default locations.

    Raises:
        ConfigNotFoundError: When no config file exists.
        ConfigParseError: When the file cannot be read, is not UTF-8 text,
            is not valid YAML or is not a mapping.
        ConfigValidationError: When the grid section is invalid.
    """
    paths = _config_paths(config_path)
    for path in paths:
        if path.is_file():
            try:
                with path.open(encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigParseError(f"Invalid YAML in {path}: {exc}") from exc
            except UnicodeDecodeError as exc:
                raise ConfigParseError(f"Config {path} is not UTF-8 text: {exc}") from exc
            except OSError as exc:
                raise ConfigParseError(f"Cannot read config {path}: {exc}") from exc
            shape = parse_grid(data, str(path))
            logger.debug("Loaded grid %s from %s", shape, path)
            return shape
    path_list = "\n".join(f"  - {p}" for p in paths)
    raise ConfigNotFoundError(
        f"Config not found. Create one of:\n{path_list}\n"
        f"With content:\n"
        f"  {GRID_SECTION}:\n"
        "    columns: 4\n"
        "    rows: 3"
    )
