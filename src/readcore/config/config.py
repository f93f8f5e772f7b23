"""
Configuration management for readcore using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

DEFAULT_CHARSET = "utf-8"

SUPPORTED_PARSERS = ("lxml", "html.parser")

DEFAULT_JUNK_TAGS: Tuple[str, ...] = (
    # External scripts
    "style",
    "iframe",
    "script",
    "noscript",
    "object",
    "applet",
    "frame",
    "embed",
    "frameset",
    "link",
    # Out-of-date presentational tags
    "basefont",
    "bgsound",
    "blink",
    "keygen",
    "command",
    "menu",
    "marquee",
    # Form objects
    "form",
    "button",
    "input",
    "textarea",
    "select",
    "label",
    "option",
    # HTML5 layout tags
    "canvas",
    "datalist",
    "nav",
    # Injected comment widgets
    'id="disqus_thread"',
    'href="http://disqus.com"',
)

DEFAULT_JUNK_ATTRIBUTES: Tuple[str, ...] = (
    "style",
    "class",
    "onclick",
    "onmouseover",
    "align",
    "border",
    "margin",
)


# --- Nested Configuration Models ---


class ExtractionSettings(BaseModel):
    """Tunables for the scoring heuristic and document parsing."""

    charset: str = Field(default=DEFAULT_CHARSET, description="Charset label used when the caller gives none.")
    parser: str = Field(default="lxml", description="BeautifulSoup tree builder used to parse documents.")
    paragraph_tags: Tuple[str, ...] = Field(
        default=("p",), description="Tags whose parents are scored as content containers."
    )
    min_paragraph_length: int = Field(
        default=10, description="Paragraph text longer than this adds its length to the container score."
    )
    base_score: int = Field(default=25, description="Bonus for a likely-article class/id; twice this is the penalty.")
    neutral_score: int = Field(default=1, description="Score for a class/id that matches neither pattern.")
    title_delimiter: str = Field(default=" - ", description="Separator between article and site name in <title>.")

    @field_validator("parser")
    @classmethod
    def validate_parser(cls, v: str) -> str:
        if v not in SUPPORTED_PARSERS:
            raise ValueError(f"parser must be one of {', '.join(SUPPORTED_PARSERS)}")
        return v

    @field_validator("paragraph_tags")
    @classmethod
    def validate_paragraph_tags(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Ensure at least one paragraph tag is scored."""
        tags = tuple(tag.strip().lower() for tag in v if tag.strip())
        if not tags:
            raise ValueError("paragraph_tags must contain at least one tag name")
        return tags

    @field_validator("min_paragraph_length")
    @classmethod
    def validate_min_length(cls, v: int) -> int:
        if v < 0:
            raise ValueError("min_paragraph_length cannot be negative")
        return v

    @field_validator("base_score")
    @classmethod
    def validate_base_score(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("base_score must be positive")
        return v


class SanitizerConfig(BaseModel):
    """Tags and attributes stripped from the extracted fragment."""

    model_config = ConfigDict(frozen=True)

    junk_tags: Tuple[str, ...] = Field(
        default=DEFAULT_JUNK_TAGS,
        description='Tag names removed with their subtree; name="value" entries match an attribute instead.',
    )
    junk_attributes: Tuple[str, ...] = Field(
        default=DEFAULT_JUNK_ATTRIBUTES, description="Attributes removed from every remaining element."
    )


class FetchConfig(BaseModel):
    """Settings for the HTTP fetch used by the URL entry points."""

    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds.")
    user_agent: str = Field(default="readcore/0.1 (+https://pypi.org/project/readcore/)")
    follow_redirects: bool = Field(default=True)
    max_bytes: int = Field(default=10 * 1024 * 1024, gt=0, description="Largest response body accepted.")


class MonitoringConfig(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")
    json_logs: bool = Field(default=False, description="Render console logs as JSON.")

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
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    sanitizer: SanitizerConfig = Field(default_factory=SanitizerConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="READCORE_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for name in ("readcore.yaml", "readcore.yml"):
        path = current_dir / name
        if path.exists():
            return path
    return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ``path``, a discovered file, or defaults."""
    config_path = path or find_config_file()
    if config_path is None:
        log.debug("No config file found. Using default settings.")
        return Config()
    return Config.from_yaml(config_path)
