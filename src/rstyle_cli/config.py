import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rstyle_linter.config import LintConfig
from rstyle_linter.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".rstyle-lint.toml", "pyproject.toml")
TOOL_SECTION = "rstyle-lint"


def find_config_file(start: Path) -> Path | None:
    """Closest config file in `start` or one of its parents.

    Files that cannot be parsed are skipped; they may belong to an
    unrelated project further up the tree.
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if not candidate.is_file():
                continue
            try:
                data = _read_toml(candidate)
            except ConfigError as exc:
                logger.warning("Skipping %s", exc)
                continue
            if _section(data) is not None:
                return candidate
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"{path}: {exc.strerror or exc}") from exc


def _section(data: dict[str, Any]) -> dict[str, Any] | None:
    section = data.get("tool", {}).get(TOOL_SECTION)
    return section if isinstance(section, dict) else None


def _normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    # Rule ids under [severity] keep their dashes
    return {key.replace("-", "_"): value for key, value in data.items()}


def load_config(config_path: Path | None = None, **overrides: Any) -> LintConfig:
    """Build the run's LintConfig from a TOML file plus CLI overrides.

    Without an explicit path, the closest `.rstyle-lint.toml` or
    `pyproject.toml` with a `[tool.rstyle-lint]` table is used. Overrides set
    to None are ignored.
    """
    data: dict[str, Any] = {}

    if config_path is None:
        config_path = find_config_file(Path.cwd())
    elif not config_path.is_file():
        raise ConfigError(f"config file not found: {config_path}")

    if config_path is not None:
        logger.debug("Loading configuration from %s", config_path)
        section = _section(_read_toml(config_path))
        if section is None:
            logger.warning("%s has no [tool.%s] table, using defaults", config_path, TOOL_SECTION)
        else:
            data = _normalize_keys(section)

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return LintConfig.model_validate(data)
    except ValidationError as exc:
        source = str(config_path) if config_path else "options"
        raise ConfigError(f"{source}: {exc}") from exc
