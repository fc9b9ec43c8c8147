"""Runtime side of the harmonizer: configuration, event path and display."""

from .engine import HarmonizerEngine  # noqa: F401
from .config_store import Configuration, ConfigurationStore  # noqa: F401
from .harmonize import NoteEvent, OtherEvent, harmonize, harmonize_event  # noqa: F401
