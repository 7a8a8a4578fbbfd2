"""
CLI Module

Architectural Intent:
- Command-line interface for journeystats
- Replays recorded deployment events through the real handler wiring
- Delegates to the composition root for all adapters
- Supports --verbose/--debug flags for log level control
"""

import argparse
import asyncio
import json
import logging
import sys
import traceback
from pathlib import Path

from journeystats.composition_root import create_container, initialize_telemetry
from journeystats.domain.events.deployment_events import EVENT_TYPES
from journeystats.domain.services.engine_profile import EngineProfileExtractor
from journeystats.domain.value_objects.analytics_record import AnalyticsRecord
from journeystats.domain.value_objects.diagram_type import DiagramType
from journeystats.infrastructure.config import load_config
from journeystats.infrastructure.logging import configure_logging, level_from_name


class PrintingSink:
    """Tracking sink echoing each record as one JSON line on stdout."""

    def __init__(self) -> None:
        self.count = 0

    def track(self, event_name: str, record: AnalyticsRecord) -> None:
        self.count += 1
        print(json.dumps({"event": event_name, "record": record.to_dict()}))


def load_events(path: str) -> list[tuple[str, object]]:
    """Read a replay file into (event_name, event) pairs.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a list of known, well-formed events
    """
    with open(path) as f:
        entries = json.load(f)

    if not isinstance(entries, list):
        raise ValueError("events file must contain a list")

    events = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"entry {index} must be an object")
        name = entry.get("name")
        event_type = EVENT_TYPES.get(name)
        if event_type is None:
            raise ValueError(f"entry {index} has unknown event name {name!r}")
        try:
            events.append((name, event_type.from_dict(entry.get("payload"))))
        except ValueError as e:
            raise ValueError(f"entry {index}: {e}") from e
    return events


async def replay(args, container, events) -> None:
    await initialize_telemetry(container)

    printer = PrintingSink()
    container.tracker.add(printer)

    for name, event in events:
        await container.event_bus.publish(name, event)

    print(
        f"[+] Replayed {len(events)} events, tracked {printer.count} records.",
        file=sys.stderr,
    )

    if args.flush:
        if not container.mixpanel.is_enabled:
            print("[-] Analytics disabled, nothing to flush.", file=sys.stderr)
            return
        sent = await container.mixpanel.flush()
        print(f"[+] Flushed {sent} events to Mixpanel.", file=sys.stderr)


def show_profile(args) -> None:
    diagram_type = DiagramType.parse(args.type)
    source = Path(args.diagram_file).read_text(encoding="utf-8")
    profile = EngineProfileExtractor().resolve(source, diagram_type)
    print(json.dumps(profile.to_dict()))


async def async_main():
    parser = argparse.ArgumentParser(
        description="journeystats: deployment analytics for diagram editors"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to journeystats.json"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    replay_parser = subparsers.add_parser(
        "replay", help="Replay recorded deployment events through the trackers"
    )
    replay_parser.add_argument("events_file", help="JSON file with recorded events")
    replay_parser.add_argument(
        "--flush", action="store_true", help="Send queued events to Mixpanel"
    )

    profile_parser = subparsers.add_parser(
        "profile", help="Show the engine profile of a diagram file"
    )
    profile_parser.add_argument("diagram_file", help="BPMN or DMN file")
    profile_parser.add_argument(
        "--type",
        "-t",
        default=DiagramType.BPMN.value,
        choices=[t.value for t in DiagramType],
        help="Editor tab type of the diagram",
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"[-] Invalid configuration: {e}")
        sys.exit(1)

    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = level_from_name(config.log_level)
    configure_logging(level=level, json_format=config.log_json)

    verbose = args.verbose or args.debug

    if args.command == "replay":
        try:
            events = load_events(args.events_file)
        except FileNotFoundError as e:
            print(f"[-] Events file not found: {e}")
            sys.exit(1)
        except ValueError as e:
            print(f"[-] Invalid events file: {e}")
            if verbose:
                traceback.print_exc()
            sys.exit(1)

        try:
            container = create_container(config)
        except ValueError as e:
            print(f"[-] Invalid configuration: {e}")
            sys.exit(1)

        await replay(args, container, events)
        return

    if args.command == "profile":
        try:
            show_profile(args)
        except FileNotFoundError as e:
            print(f"[-] Diagram file not found: {e}")
            sys.exit(1)
        return

    parser.print_help()


def main():
    asyncio.run(async_main())


if __name__ == "__main__":
    main()
