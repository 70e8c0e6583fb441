"""CLI configuration via dataclass (no pydantic -- instant construction)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_OUTPUT_FORMAT = "text"

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_OUTPUT_FORMATS = {"text", "json"}


@dataclass
class CLIConfig:
    """Configuration for the ``toxid`` command.

    Priority (highest wins): constructor arg > env var > config.toml > default.

    ``TOXID_HOME`` overrides the data directory (``~/.toxid``), which is
    where the optional ``config.toml`` is looked up.
    """

    log_level: str | None = None
    output_format: str | None = None
    data_dir: Path | str | None = None

    def __post_init__(self) -> None:
        if self.data_dir is None:
            toxid_home = os.getenv("TOXID_HOME")
            self.data_dir = Path(toxid_home) if toxid_home else Path.home() / ".toxid"
        else:
            self.data_dir = Path(self.data_dir)

        # Env vars fill what the constructor left open
        if self.log_level is None:
            self.log_level = os.getenv("TOXID_LOG_LEVEL") or None
        if self.output_format is None:
            self.output_format = os.getenv("TOXID_OUTPUT_FORMAT") or None

        # Load optional config.toml (lowest priority -- only fills remaining gaps)
        config_path = self.data_dir / "config.toml"
        if config_path.exists():
            self._load_config_file(config_path)

        if self.log_level is None:
            self.log_level = _DEFAULT_LOG_LEVEL
        if self.output_format is None:
            self.output_format = _DEFAULT_OUTPUT_FORMAT

        self.log_level = self.log_level.upper()
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{self.log_level}'. "
                f"Must be one of: {sorted(_VALID_LOG_LEVELS)}"
            )
        self.output_format = self.output_format.lower()
        if self.output_format not in _VALID_OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output_format '{self.output_format}'. "
                f"Must be one of: {sorted(_VALID_OUTPUT_FORMATS)}"
            )

    def _load_config_file(self, path: Path) -> None:
        """Load optional config.toml, applying values for fields still unset."""
        try:
            import tomllib
        except ModuleNotFoundError:
            import tomli as tomllib  # type: ignore[no-redef]  # Python 3.10 fallback

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except Exception:
            logger.warning("Failed to load config file %s", path, exc_info=True)
            return

        cli_section = data.get("cli", {})

        if self.log_level is None and "log_level" in cli_section:
            self.log_level = str(cli_section["log_level"])
        if self.output_format is None and "output_format" in cli_section:
            self.output_format = str(cli_section["output_format"])

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)
