# src/config/settings.py
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.analyzers.sentiment_result import Thresholds
from src.config.errors import ConfigError, ConfigIOError, ConfigParseError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"


class AnalysisSettings(BaseModel):
    """Classification thresholds and which scores to show."""

    model_config = ConfigDict(frozen=True)

    positive_threshold: float
    negative_threshold: float
    include_compound: bool
    include_individual: bool

    @property
    def thresholds(self) -> Thresholds:
        """Threshold pair; raises ValidationError if the order is wrong."""
        return Thresholds(positive=self.positive_threshold, negative=self.negative_threshold)

    def with_overrides(
        self,
        positive_threshold: Optional[float] = None,
        negative_threshold: Optional[float] = None,
        verbose: bool = False,
    ) -> "AnalysisSettings":
        """Return a copy with command line overrides applied."""
        update = {}
        if positive_threshold is not None:
            update["positive_threshold"] = positive_threshold
        if negative_threshold is not None:
            update["negative_threshold"] = negative_threshold
        if verbose:
            update["include_individual"] = True
        return self.model_copy(update=update)


class LoggingSettings(BaseModel):
    """Log level and optional log file (empty or null means console)."""

    model_config = ConfigDict(frozen=True)

    level: str
    file: Optional[str]


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    analysis: AnalysisSettings
    logging: LoggingSettings

    @classmethod
    def default(cls) -> "Settings":
        """Built-in configuration used when no file can be loaded."""
        return cls(
            analysis=AnalysisSettings(
                positive_threshold=0.05,
                negative_threshold=-0.05,
                include_compound=True,
                include_individual=False,
            ),
            logging=LoggingSettings(level="info", file=""),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file.

        Every key of the schema must be present; nothing is defaulted here.

        Raises:
            ConfigIOError: If the file cannot be read.
            ConfigParseError: If the content is not valid YAML or does not
                match the schema.
        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIOError(path, e) from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigParseError(path, e) from e

        if not isinstance(data, dict):
            raise ConfigParseError(path, "top level of the document must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(path, _summarize(e)) from e


class RuntimeEnvironment(BaseSettings):
    """Environment overrides, e.g. SENTIMENT_CONFIG=/etc/sentiment.yaml."""

    model_config = SettingsConfigDict(env_prefix="SENTIMENT_")

    config: str = DEFAULT_CONFIG_PATH


def load_settings(path: Path) -> Settings:
    """Load settings, substituting the defaults on any configuration error."""
    try:
        settings = Settings.from_yaml(path)
    except ConfigError as e:
        logger.warning(f"Failed to load config from {path}: {e.cause}. Using defaults")
        return Settings.default()

    logger.debug(f"Settings loaded from {path}")
    return settings


def _summarize(error: ValidationError) -> str:
    """Collapse a pydantic error report into a single line."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )
