from __future__ import annotations

"""Configuration loading and validation for the harmonizer.

This module loads YAML settings, applies defaults, and validates them into
a pydantic model that can be turned into the compiler's Configuration.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..engine.config_store import Configuration
from ..errors import ConfigError
from ..theory.note_utils import parse_root
from ..theory.scales import find_scale
from ..theory.voicings import DEFAULT_VOICE_COUNT, DEGREE_SLIDER_MAX, DEGREE_SLIDER_MIN, Voice

logger = logging.getLogger(__name__)

CONFIG_ENV = "HARMONIZER_CONFIG"
NO_SCALE_NAMES = {"none", "off", ""}
ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class VoiceSettings(BaseModel):
    degree: int = Field(default=DEGREE_SLIDER_MIN, ge=DEGREE_SLIDER_MIN, le=DEGREE_SLIDER_MAX)
    octave: int = Field(default=0, ge=-2, le=2)
    enabled: bool = True


class LoggingSettings(BaseModel):
    level: str = "WARNING"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = str(v).upper()
        if v not in ALLOWED_LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return v


class HarmonizerSettings(BaseModel):
    root: str = "C"
    scale: str = "Ionian - Major"
    voices: List[VoiceSettings] = Field(default_factory=list)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("root", mode="before")
    @classmethod
    def _root_known(cls, v: Any) -> str:
        parse_root(str(v))
        return str(v)

    @field_validator("scale", mode="before")
    @classmethod
    def _scale_known(cls, v: Any) -> str:
        v = "none" if v is None else str(v)
        if v.strip().lower() not in NO_SCALE_NAMES:
            try:
                find_scale(v)
            except KeyError as e:
                raise ValueError(str(e.args[0])) from e
        return v

    @field_validator("voices")
    @classmethod
    def _voice_count(cls, v: List[VoiceSettings]) -> List[VoiceSettings]:
        if len(v) > DEFAULT_VOICE_COUNT:
            raise ValueError(f"at most {DEFAULT_VOICE_COUNT} voices are supported, got {len(v)}")
        return v


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return data


def default_config_path() -> Path:
    return Path(__file__).with_name("defaults.yml")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load settings from YAML.

    Args:
        path: Optional path to a YAML file. Falls back to $HARMONIZER_CONFIG,
            then to the package defaults.

    Returns:
        The raw settings dictionary.
    """
    path = path or os.environ.get(CONFIG_ENV)
    if path:
        logger.info("loading settings from %s", path)
        return _load_yaml(Path(path))
    return _load_yaml(default_config_path())


def validate_config(cfg: Dict[str, Any]) -> HarmonizerSettings:
    """Apply defaults and validate a raw settings dictionary."""
    cfg = dict(cfg)
    cfg.setdefault("root", "C")
    cfg.setdefault("scale", "Ionian - Major")
    cfg.setdefault("voices", [{"degree": 1, "octave": 0, "enabled": True}])
    cfg.setdefault("logging", {})
    if cfg["voices"] is None:
        cfg["voices"] = []

    unknown = set(cfg) - set(HarmonizerSettings.model_fields)
    for key in sorted(unknown):
        logger.warning("ignoring unknown settings key %r", key)
        cfg.pop(key)

    try:
        return HarmonizerSettings(**cfg)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def settings_to_configuration(settings: HarmonizerSettings, voices: int = DEFAULT_VOICE_COUNT) -> Configuration:
    root = parse_root(settings.root)
    if settings.scale.strip().lower() in NO_SCALE_NAMES:
        scale_id = None
    else:
        scale_id = find_scale(settings.scale)
    voicing = [
        Voice(degree=v.degree - 1, octave=12 * v.octave, enabled=v.enabled)
        for v in settings.voices[:voices]
    ]
    while len(voicing) < voices:
        voicing.append(Voice(degree=0, enabled=False))
    return Configuration(root=root, scale_id=scale_id, voicing=tuple(voicing))


def load_configuration(path: Optional[str] = None) -> Configuration:
    """Load, validate and convert settings in one step."""
    return settings_to_configuration(validate_config(load_config(path)))
