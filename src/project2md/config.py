"""Configuration for documentation runs.

All defaults live in DocumentationConfig and are passed explicitly into the
documenter; nothing in the package reads process-wide settings. A configuration can
be loaded from a YAML file whose top level is a mapping of the field names below
(hyphens may be used instead of underscores):

    exclude_names: [vendor, node_modules, .git]
    include_package_info: true
    json_enabled: true
    project_type: Django Web Application
    framework: django
    database_url: postgresql://localhost/app
    max_depth: 4
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    field_validator,
    model_validator,
)

from project2md.exceptions import ConfigurationError
from project2md.types import PathType

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("project2md.yaml", ".project2md.yaml")

DEFAULT_EXCLUDE_NAMES: Tuple[str, ...] = (
    "vendor",
    "storage",
    "node_modules",
    "tests",
    ".git",
    "build",
    "dist",
    "coverage",
    ".idea",
    ".vscode",
    "__pycache__",
    ".venv",
    ".tox",
    ".mypy_cache",
    ".pytest_cache",
)


def parse_depth(value: Any) -> Optional[int]:
    """Interpret a maximum-depth setting.

    Anything that is not a non-negative integer (or a string holding one) means
    "unbounded" and yields None.

    Example:
        >>> parse_depth("3"), parse_depth(0), parse_depth("-1"), parse_depth("deep"), parse_depth(None)
        (3, 0, None, None, None)
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        depth = int(value)
    except (TypeError, ValueError):
        return None
    if isinstance(value, float) and value != depth:
        return None
    return depth if depth >= 0 else None


def format_validation_error(error: ValidationError) -> str:
    """One line per failed field, e.g. ``json_enabled: Input should be a valid boolean``."""
    return "; ".join(f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors())


class DocumentationConfig(BaseModel):
    """Settings of a documentation run.

    Unknown keys are rejected, and booleans and strings are not coerced from other
    types, so a typo in a configuration file is reported instead of ignored.

    Attributes:
        exclude_names: Entry names excluded by default (literal names, not patterns).
        include_package_info: Whether to read the lock file and report packages.
        json_enabled: Whether to write the JSON artifact next to the markdown one.
        project_type: Description shown in the report banner.
        framework: Distribution name of the project's framework, for version lookup.
        database_url: SQLAlchemy URL of the project's database, for the version probe.
        database_query: Override for the database version query.
        output: Default markdown output path.
        max_depth: Default maximum traversal depth, None for unbounded.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    exclude_names: Tuple[StrictStr, ...] = Field(default=DEFAULT_EXCLUDE_NAMES)
    include_package_info: StrictBool = True
    json_enabled: StrictBool = True
    project_type: StrictStr = "Software Project"
    framework: Optional[StrictStr] = None
    database_url: Optional[StrictStr] = None
    database_query: Optional[StrictStr] = None
    output: Optional[StrictStr] = None
    max_depth: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        """Accept ``json-enabled`` style keys as well as ``json_enabled``."""
        if isinstance(data, Mapping):
            return {str(key).replace("-", "_"): value for key, value in data.items()}
        return data

    @field_validator("max_depth", mode="before")
    @classmethod
    def validate_max_depth(cls, v: Any) -> Optional[int]:
        """Invalid depths mean unbounded rather than an error."""
        return parse_depth(v)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DocumentationConfig":
        """Build a configuration from a mapping, validating field names and types.

        Raises:
            ConfigurationError: If a key is unknown or a value has the wrong type.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {format_validation_error(e)}") from e

    def with_overrides(self, **changes: Any) -> "DocumentationConfig":
        """Copy of this configuration with every non-None keyword applied."""
        return self.model_copy(update={k: v for k, v in changes.items() if v is not None})


def load_config(path: PathType) -> DocumentationConfig:
    """Load a configuration from a YAML file.

    An empty file yields the defaults.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or has invalid content.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load {path}: {e}") from e

    if content is None:
        return DocumentationConfig()
    if not isinstance(content, dict):
        raise ConfigurationError(f"{path}: top level must be a mapping")
    try:
        return DocumentationConfig.from_mapping(content)
    except ConfigurationError as e:
        raise ConfigurationError(f"{path}: {e}") from e


def find_config(root: PathType) -> Optional[Path]:
    """Configuration file in a project root, if there is one."""
    for name in CONFIG_FILENAMES:
        candidate = Path(root) / name
        if candidate.is_file():
            return candidate
    return None


def discover_config(root: PathType) -> DocumentationConfig:
    """Configuration found in a project root, falling back to defaults.

    Unlike an explicitly requested file, a broken auto-discovered file only produces a
    warning.
    """
    path = find_config(root)
    if path is None:
        return DocumentationConfig()
    try:
        return load_config(path)
    except ConfigurationError as e:
        logger.warning("Ignoring configuration file: %s", e)
        return DocumentationConfig()
