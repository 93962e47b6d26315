"""Configuration management for typocheck."""

from __future__ import annotations

import json
from argparse import ArgumentParser

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from typocheck.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for a spell-check run."""

    dictionary: str = Field(Constants.DEFAULT_DICTIONARY, description="Dictionary file")
    words: list[str] = Field(default_factory=list, description="Candidate words or files")
    threshold: int = Field(
        Constants.DEFAULT_THRESHOLD, ge=1, description="Exclusive fallback score bound"
    )
    verbose: bool = False
    debug: bool = False

    @field_validator("words", mode="before")
    @classmethod
    def parse_word_list(cls, v):
        """Accept a whitespace-separated string or a list of tokens."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return v.split()
        return v


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e

    config_dict = {
        "dictionary": get_value("dictionary", Constants.DEFAULT_DICTIONARY),
        "words": cli_args.words or json_config.get("words", []),
        "threshold": get_value("threshold", Constants.DEFAULT_THRESHOLD),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
