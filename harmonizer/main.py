from __future__ import annotations

"""CLI entry point for the harmonizer."""

import argparse
import sys
from typing import Any, Dict, List, Optional

from . import __version__
from .config.config import ALLOWED_LOG_LEVELS, load_config, settings_to_configuration, validate_config
from .engine.display import format_chord_map
from .engine.engine import HarmonizerEngine
from .engine.harmonize import NoteEvent
from .errors import HarmonizerError
from .theory.note_utils import pitch_name
from .theory.scales import SCALE_CATALOG
from .util.logging_utils import setup_logging


def _parse_voice(text: str) -> Dict[str, Any]:
    """'3' -> degree 3, octave 0; '5:-1' -> degree 5, one octave down."""
    degree, _, octave = text.partition(":")
    try:
        return {"degree": int(degree), "octave": int(octave or 0), "enabled": True}
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid voice {text!r}, expected DEGREE[:OCTAVE]") from e


def _add_selection_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="Path to YAML settings")
    p.add_argument("--root", default=None, help="Root note, e.g. C, F#, Bb")
    p.add_argument("--scale", default=None, help="Scale name or alias, e.g. dorian")
    p.add_argument(
        "--voice",
        dest="voices",
        action="append",
        type=_parse_voice,
        default=None,
        help="Voice as DEGREE[:OCTAVE]; repeat for several voices (replaces configured voices)",
    )


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="harmonizer", description="Scale/voicing harmonizer")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--log-level", default=None, type=str.upper, choices=sorted(ALLOWED_LOG_LEVELS))
    p.add_argument("--log-file", default=None)
    sub = p.add_subparsers(dest="cmd")

    sub.add_parser("list-scales", help="List the scale catalog")

    sp = sub.add_parser("show", help="Show the compiled scale and chord map")
    _add_selection_args(sp)

    hp = sub.add_parser("harmonize", help="Harmonize MIDI pitches")
    _add_selection_args(hp)
    hp.add_argument("pitches", nargs="+", type=int)
    return p.parse_args(argv)


def _build_engine(args: argparse.Namespace) -> HarmonizerEngine:
    raw = load_config(args.config)
    if args.root is not None:
        raw["root"] = args.root
    if args.scale is not None:
        raw["scale"] = args.scale
    if args.voices is not None:
        raw["voices"] = args.voices
    settings = validate_config(raw)
    if args.log_level is None and args.log_file is None:
        setup_logging(settings.logging.level, settings.logging.file)
    return HarmonizerEngine.from_configuration(settings_to_configuration(settings))


def _cmd_list_scales() -> int:
    for idx, st in enumerate(SCALE_CATALOG):
        print(f"{idx:>2}  {st.family:<16} {st.name} ({len(st)} notes)")
    return 0


def _cmd_show(engine: HarmonizerEngine) -> int:
    disp = engine.display
    print(disp.summary())
    lo, hi = disp.degree_range
    print(f"Degrees: {lo}..{hi}")
    print(format_chord_map(engine.chord_map))
    print()
    for line in engine.store.describe_parameters():
        print(line)
    return 0


def _cmd_harmonize(engine: HarmonizerEngine, pitches: List[int]) -> int:
    for p in pitches:
        if not 0 <= p <= 127:
            print(f"ERROR: pitch out of range: {p}", file=sys.stderr)
            return 1
        out = engine.handle_midi(NoteEvent("note_on", p))
        rendered = " ".join(f"{ev.pitch}({pitch_name(ev.pitch)})" for ev in out) or "-"
        print(f"{p}({pitch_name(p)}) -> {rendered}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.version:
        print(f"harmonizer {__version__}")
        return 0
    if args.log_level is not None or args.log_file is not None:
        try:
            setup_logging(args.log_level or "WARNING", args.log_file)
        except OSError as e:
            print(f"ERROR: cannot open log file: {e}", file=sys.stderr)
            return 1

    if args.cmd == "list-scales":
        return _cmd_list_scales()
    if args.cmd not in ("show", "harmonize"):
        print("ERROR: a command is required (list-scales, show, harmonize)", file=sys.stderr)
        return 2

    try:
        engine = _build_engine(args)
    except OSError as e:
        print(f"ERROR: cannot open log file: {e}", file=sys.stderr)
        return 1
    except HarmonizerError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.cmd == "show":
        return _cmd_show(engine)
    return _cmd_harmonize(engine, args.pitches)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
