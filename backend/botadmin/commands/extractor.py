"""Slash-command declaration extractor.

Reads the bot's command source (a JavaScript module declaring
``<NAME>_COMMAND = { ... }`` objects and an ``ALL_COMMANDS = [ ... ]`` list)
and turns it into command records for the admin UI.

This is a heuristic text scanner, not a JavaScript parser:

- Declarations are found line by line and closed by counting braces.
  Braces inside string literals are counted too, so a description
  containing an unbalanced ``{`` or ``}`` will throw the count off.
- Fields are pulled out with regular expressions; the first match wins.
- A command is disabled by commenting its identifier out of ALL_COMMANDS.

Malformed input never raises. Blocks without a name or description are
skipped, unterminated blocks are dropped at end of input, and a missing
ALL_COMMANDS list leaves every command inactive.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


DEFAULT_OPTION_TYPE = 3  # STRING option in the chat platform's numbering

DECLARATION_START = re.compile(r"^\s*(?:export\s+)?(?:const|let|var)\s+(\w+_COMMAND)\s*=\s*\{")
# The closing quote must match the opening one, so "bot's" keeps its apostrophe.
NAME_FIELD = re.compile(r"name:\s*([\"'])((?:(?!\1).)+)\1")
DESCRIPTION_FIELD = re.compile(r"description:\s*([\"'])((?:(?!\1).)+)\1")
OPTIONS_FIELD = re.compile(r"options:\s*\[([\s\S]*?)\]")
OPTION_BOUNDARY = re.compile(r"\},\s*\{")
TYPE_FIELD = re.compile(r"type:\s*(\d+)")
REQUIRED_FIELD = re.compile(r"required:\s*(true|false)")
ACTIVE_SET = re.compile(r"(?:const|let|var)\s+ALL_COMMANDS\s*=\s*\[([^\]]+)\]")

LINE_COMMENT = "//"


class CommandSourceError(Exception):
    """Raised when there is no command source text to extract from."""


class Activation(str, Enum):
    """How an identifier appears in the ALL_COMMANDS list."""

    ACTIVE = "active"
    EXCLUDED = "excluded"  # listed, but commented out
    ABSENT = "absent"

    @property
    def is_active(self) -> bool:
        return self is Activation.ACTIVE


@dataclass(frozen=True)
class Declaration:
    """A raw ``<NAME>_COMMAND = { ... }`` block."""

    identifier: str
    raw_text: str


@dataclass(frozen=True)
class CommandFields:
    """Top-level fields required for a declaration to count as a command."""

    name: str
    description: str


@dataclass
class CommandOption:
    """One entry of a command's ``options`` list."""

    name: str
    description: str
    kind: int = DEFAULT_OPTION_TYPE
    required: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape consumed by the UI."""
        return {
            "name": self.name,
            "description": self.description,
            "type": self.kind,
            "required": self.required,
        }


@dataclass
class CommandDefinition:
    """A slash command as declared in the bot source."""

    name: str
    description: str
    active: bool = False
    options: list[CommandOption] = field(default_factory=list)

    @property
    def has_options(self) -> bool:
        return bool(self.options)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape consumed by the UI."""
        return {
            "name": self.name,
            "description": self.description,
            "active": self.active,
            "options": [option.to_dict() for option in self.options],
        }


# =============================================================================
# Declaration locator
# =============================================================================


def locate_declarations(text: str) -> list[Declaration]:
    """Find every ``<NAME>_COMMAND = { ... }`` block in source order.

    The closing line is found by brace depth. A block whose depth never
    returns to zero is not emitted.
    """
    declarations: list[Declaration] = []
    identifier: str | None = None
    buffer: list[str] = []
    depth = 0

    for line in text.split("\n"):
        start = DECLARATION_START.match(line)
        if start:
            # Opening brace is already counted; nested braces on the same
            # line (e.g. a one-line declaration) still have to be balanced.
            identifier = start.group(1)
            buffer = [line]
            depth = 1 + line[start.end():].count("{") - line[start.end():].count("}")
        elif identifier is not None:
            buffer.append(line)
            depth += line.count("{") - line.count("}")
        else:
            continue

        if depth <= 0:
            declarations.append(Declaration(identifier, "\n".join(buffer) + "\n"))
            identifier = None
            buffer = []
            depth = 0

    return declarations


# =============================================================================
# Field extraction
# =============================================================================


def extract_fields(block: str) -> CommandFields | None:
    """Extract ``name`` and ``description`` from a block, or None."""
    name_match = NAME_FIELD.search(block)
    if not name_match:
        return None

    description_match = DESCRIPTION_FIELD.search(block)
    if not description_match:
        return None

    return CommandFields(name=name_match.group(2), description=description_match.group(2))


def extract_options(block: str) -> list[CommandOption]:
    """Extract the ``options`` list of a block.

    Entries are split on ``},{`` boundaries, so an entry holding a nested
    object (``choices: [{...}]``) is cut at that point.
    """
    options_match = OPTIONS_FIELD.search(block)
    if not options_match:
        return []

    options: list[CommandOption] = []
    for entry in OPTION_BOUNDARY.split(options_match.group(1)):
        entry = entry.strip()
        if entry.startswith("{"):
            entry = entry[1:]
        if entry.endswith("}"):
            entry = entry[:-1]
        entry = entry.strip()
        if not entry:
            continue

        fields = extract_fields(entry)
        if fields is None:
            continue

        type_match = TYPE_FIELD.search(entry)
        required_match = REQUIRED_FIELD.search(entry)
        options.append(
            CommandOption(
                name=fields.name,
                description=fields.description,
                kind=int(type_match.group(1)) if type_match else DEFAULT_OPTION_TYPE,
                required=required_match.group(1) == "true" if required_match else False,
            )
        )

    return options


# =============================================================================
# Activation
# =============================================================================


def _list_entries(fragment: str) -> list[str]:
    return [entry.strip() for entry in fragment.split(",") if entry.strip()]


def resolve_activation(full_text: str, identifier: str) -> Activation:
    """Classify how ``identifier`` appears in the ALL_COMMANDS list.

    Entries after a ``//`` marker on a line are excluded. An excluded
    occurrence anywhere in the list wins over an active one.
    """
    active_set = ACTIVE_SET.search(full_text)
    if not active_set:
        return Activation.ABSENT

    listed = False
    for line in active_set.group(1).split("\n"):
        code, marker, comment = line.partition(LINE_COMMENT)
        if marker and identifier in _list_entries(comment):
            return Activation.EXCLUDED
        if identifier in _list_entries(code):
            listed = True

    return Activation.ACTIVE if listed else Activation.ABSENT


def resolve_active(full_text: str, identifier: str) -> bool:
    """True when ``identifier`` is listed in ALL_COMMANDS and not commented out."""
    return resolve_activation(full_text, identifier).is_active


# =============================================================================
# Orchestration
# =============================================================================


def extract_all_commands(text: str | None) -> list[CommandDefinition]:
    """Extract every recognizable command declaration from ``text``.

    Raises:
        CommandSourceError: If ``text`` is None.
    """
    if text is None:
        raise CommandSourceError("No command source text was supplied")

    commands = []
    for declaration in locate_declarations(text):
        fields = extract_fields(declaration.raw_text)
        if fields is None:
            continue

        commands.append(
            CommandDefinition(
                name=fields.name,
                description=fields.description,
                active=resolve_active(text, declaration.identifier),
                options=extract_options(declaration.raw_text),
            )
        )

    return commands


def find_command(text: str, name: str) -> CommandDefinition | None:
    """Get a single command by its ``name`` field."""
    for command in extract_all_commands(text):
        if command.name == name:
            return command
    return None
