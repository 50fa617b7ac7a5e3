"""
Configuration management for a11ycheck using Pydantic.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

import structlog
import yaml
from pydantic import BaseModel, Field, StrictBool, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = structlog.get_logger(__name__)

CONFIG_FILE_NAMES = (
    "a11y.config.json",
    "a11y.config.yaml",
    "a11y.config.yml",
    ".a11ycheck.yaml",
)

# --- Nested Configuration Models ---


class ScanConfig(BaseModel):
    """File discovery configuration."""

    allowed_extensions: List[str] = Field(
        default_factory=lambda: [".latte", ".html", ".php", ".twig", ".edge", ".tsx", ".jsx"],
        description="File extensions treated as markup documents.",
    )
    excluded_dirs: List[str] = Field(
        default_factory=lambda: ["node_modules", "vendor", "dist", "build", "temp", ".idea", ".git", "log", "bin"],
        description="Directory names skipped during recursive discovery.",
    )
    max_concurrency: int = Field(default=8, ge=1, description="Documents analyzed concurrently.")
    encoding: str = Field(default="utf-8", description="Encoding used to read documents.")

    @field_validator("allowed_extensions")
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        """Lower-case extensions and ensure the leading dot."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("allowed_extensions must contain at least one extension")
        return normalized


class FetchConfig(BaseModel):
    """Remote document retrieval configuration."""

    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds.")
    user_agent: str = Field(
        default="a11ycheck/0.1 (+accessibility audit)",
        description="User-Agent string for HTTP requests.",
    )
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects.")


class MonitoringConfig(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: Optional[str] = Field(
        default=None,
        description="Path to a JSON log file. If None, logs go to the console.",
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    rules: Dict[str, StrictBool] = Field(
        default_factory=dict,
        description="Rule or diagnostic kind identifier -> enabled flag. Absent means enabled.",
    )
    scan: ScanConfig = Field(default_factory=ScanConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(
        env_prefix="A11YCHECK_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def from_file(cls, path: Path) -> Config:
        """Load configuration from a JSON or YAML file."""
        log.debug("Loading configuration file", path=str(path))
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            data = json.loads(text) if text.strip() else None
        else:
            data = yaml.safe_load(text)
        if not data:
            log.warning("Configuration file is empty, using default settings", path=str(path))
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping, got {type(data).__name__}")
        return cls(**data)

    def rule_flags(self) -> Mapping[str, bool]:
        """Read-only view of the rule enablement flags for one run."""
        return MappingProxyType(dict(self.rules))


def is_rule_enabled(rules: Mapping[str, Any], rule_id: str) -> bool:
    """Only an explicit ``False`` disables a rule; absent keys stay enabled."""
    return rules.get(rule_id) is not False


def find_config_file(directory: Optional[Path] = None) -> Path | None:
    current_dir = directory or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        path = current_dir / name
        if path.exists():
            return path
    return None


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from ``path`` (or the discovered file) with fallback.

    A missing, unparseable or invalid file never aborts the run: a warning is
    logged and the all-rules-enabled defaults are returned.
    """
    config_path = path or find_config_file()
    if config_path is None:
        log.warning("No config file found or invalid config. Using default rules.")
        return Config()
    try:
        config = Config.from_file(config_path)
        log.info("Configuration loaded", path=str(config_path), rules=len(config.rules))
        return config
    except (ValidationError, FileNotFoundError, ValueError, yaml.YAMLError, OSError) as e:
        log.warning(
            "No config file found or invalid config. Using default rules.",
            path=str(config_path),
            error=str(e),
        )
    return Config()
