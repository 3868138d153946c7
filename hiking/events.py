"""
Hike event file reader.

Event files use a simplified YAML-like layout listing what happens on the
hike in order: hikers joining the group and bridges the group reaches.

    events: hiking              # Hiking event

    hikers:                     # Hikers joining the group
      - name: A                 # Name of the hiker
        speed: 100              # Speed in feet/minute
      - name: B
        speed: 50

    bridge:                     # Bridge the group reaches
      - name: 1st
        length: 100             # Length in feet

Sections may repeat and interleave. A `speed` line completes a hiker and a
`length` line completes a bridge. Numbers that cannot be used are reported as
diagnostics and the record is skipped; they never abort the read.

Usage:
    result = load_events("hiking_event_default.yaml")
    for diagnostic in result.diagnostics:
        print(diagnostic.message)
    total = HikingSession().run(result.events)
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from hiking.errors import EventFileError
from hiking.models import AddHiker, CrossBridge, HikingEvent

logger = logging.getLogger(__name__)

# "  - name: A" -> ("name", "A"); the leading list dash is optional
LINE_PATTERN = re.compile(r"^\s*(?:-\s*)?(?P<key>[A-Za-z_][\w ]*?)\s*:\s*(?P<value>.*?)\s*$")

HIKER_SECTION = "hikers"
BRIDGE_SECTION = "bridge"


class ParseFailureKind(Enum):
    INVALID_NUMBER = "invalid_number"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class ParsedNumber:
    """Outcome of reading a positive real: a value or a failure kind."""

    value: float | None = None
    failure: ParseFailureKind | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass(frozen=True)
class ParseDiagnostic:
    line_number: int
    field: str
    raw: str
    kind: ParseFailureKind

    @property
    def message(self) -> str:
        if self.kind == ParseFailureKind.INVALID_NUMBER:
            return f"line {self.line_number}: invalid input for {self.field} '{self.raw}', unable to convert to a number"
        return f"line {self.line_number}: value '{self.raw}' is out of range for {self.field}"


@dataclass
class ParseResult:
    events: list[HikingEvent] = field(default_factory=list)
    diagnostics: list[ParseDiagnostic] = field(default_factory=list)

    @property
    def hiker_count(self) -> int:
        return sum(1 for e in self.events if isinstance(e, AddHiker))

    @property
    def bridge_count(self) -> int:
        return sum(1 for e in self.events if isinstance(e, CrossBridge))


def parse_positive_real(raw: str) -> ParsedNumber:
    """Read a finite number greater than zero."""
    try:
        value = float(raw)
    except ValueError:
        return ParsedNumber(failure=ParseFailureKind.INVALID_NUMBER)
    if math.isnan(value):
        return ParsedNumber(failure=ParseFailureKind.INVALID_NUMBER)
    if math.isinf(value) or value <= 0:
        return ParsedNumber(failure=ParseFailureKind.OUT_OF_RANGE)
    return ParsedNumber(value=value)


def _strip_comment(line: str) -> str:
    return line.split("#", 1)[0]


def parse_events(text: str) -> ParseResult:
    """Parse event file contents into hike events, in file order."""
    result = ParseResult()
    section: str | None = None
    pending_name: str | None = None
    counts = {HIKER_SECTION: 0, BRIDGE_SECTION: 0}

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        match = LINE_PATTERN.match(_strip_comment(raw_line))
        if not match:
            continue
        key = match.group("key").strip().lower()
        value = match.group("value")

        if key in (HIKER_SECTION, BRIDGE_SECTION):
            section = key
            pending_name = None
            continue
        if section is None or not value:
            continue

        if key == "name":
            pending_name = value
            continue

        numeric_field = "speed" if section == HIKER_SECTION else "length"
        if key != numeric_field:
            continue

        counts[section] += 1
        parsed = parse_positive_real(value)
        if not parsed.ok:
            assert parsed.failure is not None
            diagnostic = ParseDiagnostic(line_number=line_number, field=key, raw=value, kind=parsed.failure)
            result.diagnostics.append(diagnostic)
            logger.warning(f"Skipping record: {diagnostic.message}")
            pending_name = None
            continue

        assert parsed.value is not None
        if section == HIKER_SECTION:
            name = pending_name or f"hiker-{counts[section]}"
            result.events.append(AddHiker.of(name, parsed.value))
        else:
            name = pending_name or f"bridge-{counts[section]}"
            result.events.append(CrossBridge.of(name, parsed.value))
        pending_name = None

    logger.debug(
        f"Parsed {result.hiker_count} hikers, {result.bridge_count} bridges, "
        f"{len(result.diagnostics)} skipped records"
    )
    return result


def load_events(path: str | Path) -> ParseResult:
    """Read and parse an event file.

    Raises:
        EventFileError: If the path is empty, missing or unreadable
    """
    if not str(path):
        raise EventFileError("Invalid event file: no path given")
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise EventFileError(f"Event file not found: {file_path}") from e
    except OSError as e:
        raise EventFileError(f"Unable to open the file: {file_path}, check the permission to access ({e})") from e
    logger.debug(f"Loaded event file {file_path}")
    return parse_events(text)
