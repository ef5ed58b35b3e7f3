"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from careercatalyst.export.settings import AVAILABLE_THEMES

CONFIG_ENV_VAR = "CAREERCATALYST_CONFIG"


@dataclass(frozen=True)
class EditorConfig:
    debounce_ms: int = 300

    def __post_init__(self) -> None:
        if not 0 <= self.debounce_ms <= 5000:
            raise ValueError(f"debounce_ms must be between 0 and 5000, got {self.debounce_ms}")

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


@dataclass(frozen=True)
class ExportConfig:
    output_dir: str = "./output"
    theme: str = "professional"

    def __post_init__(self) -> None:
        if self.theme not in AVAILABLE_THEMES:
            raise ValueError(f"theme must be one of {', '.join(AVAILABLE_THEMES)}, got {self.theme!r}")

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ValueError(f"level must be a logging level name, got {self.level!r}")


@dataclass(frozen=True)
class AppConfig:
    editor: EditorConfig = field(default_factory=EditorConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        candidates = [Path(env_path)] if env_path else []
        # Look for config.yaml relative to the project root
        candidates += [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        editor=EditorConfig(**raw.get("editor", {})),
        export=ExportConfig(**raw.get("export", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
    )
