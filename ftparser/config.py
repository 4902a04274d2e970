"""Configuration management for the segmentation pipelines."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .models import Language
from .profiles import DEFAULT_PROFILES, get_profile


class JapaneseConfig(BaseModel):
    """Configuration for the Japanese (Sudachi) pipeline."""

    profile: str = DEFAULT_PROFILES[Language.JAPANESE]
    split_mode: Literal["A", "B", "C"] = "C"
    dictionary: str = Field(default="core", description="sudachidict edition: small, core or full")


class KoreanConfig(BaseModel):
    """Configuration for the Korean (Kiwi) pipeline."""

    profile: str = DEFAULT_PROFILES[Language.KOREAN]
    decompound: bool = Field(default=True, description="Split compound words into sub-words")
    discard_punctuation: bool = True


class ThaiConfig(BaseModel):
    """Configuration for the Thai (PyThaiNLP) pipeline."""

    profile: str = DEFAULT_PROFILES[Language.THAI]
    engine: str = Field(default="newmm", description="PyThaiNLP word_tokenize engine")


class BatchConfig(BaseModel):
    """Configuration for batch file processing."""

    results_dir: Path = Path("results")
    progress: bool = True


class Config(BaseModel):
    """Main configuration for the segmentation pipelines."""

    japanese: JapaneseConfig = Field(default_factory=JapaneseConfig)
    korean: KoreanConfig = Field(default_factory=KoreanConfig)
    thai: ThaiConfig = Field(default_factory=ThaiConfig)
    stopwords: dict[str, Path] = Field(
        default_factory=dict,
        description="Named stopword files, referenced from profiles as config:<name>",
    )
    batch: BatchConfig = Field(default_factory=BatchConfig)

    @field_validator("stopwords", mode="before")
    @classmethod
    def convert_to_paths(cls, v):
        """Convert string values to Path."""
        if v is None:
            return {}
        return {name: Path(p) if isinstance(p, str) else p for name, p in v.items()}

    @model_validator(mode="after")
    def check_profiles(self) -> "Config":
        """Reject profile names missing from the profile table."""
        for language in Language:
            get_profile(language, self.language_config(language).profile)
        return self

    def language_config(self, language: Language) -> JapaneseConfig | KoreanConfig | ThaiConfig:
        language = Language.parse(language)
        if language is Language.JAPANESE:
            return self.japanese
        if language is Language.KOREAN:
            return self.korean
        return self.thai

    def profile_name(self, language: Language) -> str:
        return self.language_config(language).profile

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)


def load_config(config_path: Optional[str | Path] = None) -> Config:
    """Load configuration from YAML, or return the defaults when no path is given.

    Args:
        config_path: Path to a YAML config file

    Returns:
        Config object

    Raises:
        FileNotFoundError: If the config file does not exist
    """
    if config_path is None:
        return Config()
    return Config.from_yaml(config_path)
