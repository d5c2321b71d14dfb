"""Command-line interface for OOP Showcase.

This module exposes subcommands that exercise the object model: play a
single instrument, have the configured band perform, drive the car, or
replay the whole walkthrough.  Run ``python -m oop_showcase.cli --help``
for usage.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List, Optional

from .car import AirFreshener, Car
from .config_service import ConfigService
from .instruments import AcousticGuitar, Piano
from .music import Music
from .roster_service import RosterService


def _parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="OOP Showcase - instruments, a band and a car",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(subparser: argparse.ArgumentParser) -> None:
        subparser.add_argument(
            "--portable",
            "-p",
            action="store_true",
            help="Force portable mode (ignored if portable.flag is present)",
        )
        subparser.add_argument(
            "--verbose",
            action="store_true",
            help="Print extra diagnostics (developer option)",
        )

    # play
    sp = subparsers.add_parser("play", help="Tune and play a single instrument")
    sp.add_argument("kind", help="Instrument kind (see the 'kinds' command)")
    sp.add_argument("brand", help="Brand name of the instrument")
    sp.add_argument("notes", nargs="*", help="Notes to play (defaults to the configured music)")
    sp.add_argument(
        "--pedals",
        dest="using_pedals",
        action="store_true",
        default=None,
        help="Pianos only: ask for the pedals",
    )
    sp.add_argument(
        "--no-pedals",
        dest="using_pedals",
        action="store_false",
        help="Pianos only: play without the pedals",
    )
    sp.add_argument("--has-pedal", action="store_true", help="Pianos only: the piano has a pedal")
    sp.add_argument("--string-gauge", default=None, help="Guitars only: string gauge")
    add_common(sp)
    # band
    sp = subparsers.add_parser("band", help="Let the configured band perform")
    sp.add_argument("notes", nargs="*", help="Notes to play (defaults to the configured music)")
    add_common(sp)
    # drive
    sp = subparsers.add_parser("drive", help="Drive a car")
    sp.add_argument("--smell", default=None, help="Air freshener smell (defaults to the configured one)")
    add_common(sp)
    # demo
    sp = subparsers.add_parser("demo", help="Run the full walkthrough")
    add_common(sp)
    # kinds
    sp = subparsers.add_parser("kinds", help="List the supported instrument kinds")
    add_common(sp)
    return parser.parse_args(argv)


def _music_from(args: argparse.Namespace, config: Dict[str, Any]) -> Music:
    notes = getattr(args, "notes", None) or config.get("music", [])
    return Music(notes)


def _cmd_play(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    spec: Dict[str, Any] = {"kind": args.kind, "brand": args.brand, "has_pedal": args.has_pedal}
    if args.string_gauge is not None:
        spec["string_gauge"] = args.string_gauge
    roster = RosterService()
    instrument = roster.build_instrument(spec)
    music = _music_from(args, config)
    print(instrument.tune())
    if isinstance(instrument, Piano):
        print(instrument.play(music, using_pedals=args.using_pedals))
    else:
        print(instrument.play(music))
    if args.verbose:
        print(f"amplifier: {roster.amplifier!r}")
    return 0


def _cmd_band(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    roster = RosterService({"instruments": config.get("instruments", [])})
    band = roster.build_band()
    band.perform(_music_from(args, config))
    if args.verbose:
        print(f"band size: {len(band)}")
        print(f"amplifier: {roster.amplifier!r}")
    return 0


def _cmd_drive(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    smell = args.smell or config.get("air_freshener") or AirFreshener().smell
    car = Car(AirFreshener(smell))
    car.drive()
    if args.verbose:
        print(f"air freshener: {car.air_freshener.smell}")
    return 0


def _cmd_demo(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    music = Music(config.get("music", []))

    piano = Piano("Lomi", has_pedal=True)
    print(piano.play(music, using_pedals=False))
    print(piano.play(music))

    roland = AcousticGuitar("Roland", "Light")
    print(roland.play(music))

    roster = RosterService({"instruments": config.get("instruments", [])})
    roster.build_band().perform(music)

    car = Car(AirFreshener(config.get("air_freshener") or AirFreshener().smell))
    car.drive()
    if args.verbose:
        print(f"amplifier: {roster.amplifier!r}")
    return 0


def _cmd_kinds(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    for kind in RosterService.kinds():
        print(kind)
    return 0


COMMANDS = {
    "play": _cmd_play,
    "band": _cmd_band,
    "drive": _cmd_drive,
    "demo": _cmd_demo,
    "kinds": _cmd_kinds,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_arguments(argv)
    config_service = ConfigService()
    cli_portable = bool(args.portable)
    config = config_service.load_config(cli_portable=cli_portable)
    if args.verbose:
        print(f"config: {config_service.get_config_path(cli_portable)}")

    try:
        return COMMANDS[args.command](args, config)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
