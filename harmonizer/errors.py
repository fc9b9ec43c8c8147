from __future__ import annotations

"""Exception hierarchy for the harmonizer."""


class HarmonizerError(Exception):
    """Base class for all harmonizer errors."""


class CatalogError(HarmonizerError):
    """A scale type breaks the positive-steps / sum-to-12 invariant."""


class ConfigError(HarmonizerError):
    """Settings file content could not be turned into a configuration."""
