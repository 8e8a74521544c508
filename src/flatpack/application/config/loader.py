"""Loading of cabinet configuration files.

Every way a configuration can be unusable (missing file, unreadable file,
bad JSON, schema violation) surfaces as a ConfigError.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from flatpack.application.config.schema import FlatpackConfiguration


class ConfigError(Exception):
    """A configuration could not be loaded.

    Attributes:
        message: Human readable description, one line per problem.
        error_type: One of file_not_found, read_error, json_parse, validation.
        path: Configuration file, when loading from disk.
        details: Structured problems, e.g. ``{"path": "cabinet.width", ...}``.
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _field_problems(error: ValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors to dotted field paths, e.g. 'cabinet.depth'."""
    return [
        {
            "path": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _describe(problems: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for problem in problems:
        line = f"  - {problem['path'] or '<root>'}: {problem['message']}"
        if isinstance(problem["value"], (int, float, str)):
            line += f" (got: {problem['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> FlatpackConfiguration:
    """Validate configuration data.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return FlatpackConfiguration.model_validate(data)
    except ValidationError as e:
        problems = _field_problems(e)
        raise ConfigError(_describe(problems), "validation", path, problems) from e


def load_config(path: Path) -> FlatpackConfiguration:
    """Load and validate a JSON configuration file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}", "read_error", path) from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a JSON object: {path}", "validation", path
        )
    return load_config_from_dict(data, path=path)
