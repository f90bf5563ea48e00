# pin_parser/loctext.py
"""
Resolution of the localized text macros the editor writes for display strings.

    "Target"                                                  -> Target
    NSLOCTEXT("K2Node", "Target", "Target")                   -> Target
    INVTEXT("Return Value")                                   -> Return Value
    LOCGEN_FORMAT_NAMED(NSLOCTEXT("KismetSchema", "SplitPinFriendlyNameFormat",
        "{PinDisplayName} {ProtoPinDisplayName}"), "PinDisplayName",
        INVTEXT("Return Value"), "ProtoPinDisplayName", INVTEXT("X"))  -> Return Value X
"""
import logging
import re
from typing import Dict, List, Optional, Tuple

from .splitter import split_top_level
from .utils import parse_string

logger = logging.getLogger(__name__)

# Namespace of the format strings the Kismet schema generates for split pins
SCHEMA_FORMAT_NAMESPACE = "KismetSchema"

MACRO_REGEX = re.compile(r'^\s*([A-Z_]+)\s*\((.*)\)\s*$', re.DOTALL)
PLACEHOLDER_REGEX = re.compile(r'\{([^{}]+)\}')
# Deepest macro nesting resolved; anything past it is returned as written
MAX_MACRO_DEPTH = 16

_KEYED_TEXT_MACROS = ("NSLOCTEXT", "LOCTEXT")


def _split_macro(value: str) -> Optional[Tuple[str, List[str]]]:
    match = MACRO_REGEX.match(value)
    if not match:
        return None
    return match.group(1), split_top_level(match.group(2))


def _is_quoted(value: str) -> bool:
    value = value.strip()
    return len(value) >= 2 and value.startswith('"') and value.endswith('"')


def _resolve_argument(arg: str, depth: int = 0) -> Optional[str]:
    """Text of a macro argument, or None when it is neither quoted nor a known macro."""
    if _is_quoted(arg):
        return parse_string(arg)
    macro = _split_macro(arg)
    if macro:
        return _resolve_macro(*macro, depth=depth + 1)
    return None


def _resolve_format_named(args: List[str], depth: int) -> Optional[str]:
    if not args:
        return None

    format_string = None
    fmt_macro = _split_macro(args[0])
    if fmt_macro and fmt_macro[0] in _KEYED_TEXT_MACROS and len(fmt_macro[1]) >= 3:
        namespace = parse_string(fmt_macro[1][0])
        if namespace == SCHEMA_FORMAT_NAMESPACE:
            format_string = _resolve_argument(fmt_macro[1][-1], depth + 1)
    if format_string is None:
        logger.debug(f"LOCGEN_FORMAT_NAMED without a schema format string, using first argument as-is: {args[0][:80]}")
        return _resolve_argument(args[0], depth)

    # Pass 1: collect placeholder-name / resolved-text pairs
    arguments: Dict[str, str] = {}
    rest = args[1:]
    for i in range(0, len(rest) - 1, 2):
        placeholder = parse_string(rest[i])
        resolved = _resolve_argument(rest[i + 1], depth)
        arguments[placeholder] = resolved if resolved is not None else rest[i + 1]

    # Pass 2: literal substitution; unknown placeholders stay as written
    return PLACEHOLDER_REGEX.sub(lambda m: arguments.get(m.group(1), m.group(0)), format_string)


def _resolve_macro(name: str, args: List[str], depth: int = 0) -> Optional[str]:
    if not args:
        return None
    if depth > MAX_MACRO_DEPTH:
        logger.debug(f"Text macro nesting deeper than {MAX_MACRO_DEPTH} levels, left unresolved")
        return None
    if name in _KEYED_TEXT_MACROS or name == "INVTEXT":
        return _resolve_argument(args[-1], depth)
    if name == "LOCGEN_FORMAT_NAMED":
        return _resolve_format_named(args, depth)
    logger.debug(f"Unknown text macro '{name}'")
    return None


def parse_localized_text(value: Optional[str]) -> str:
    """Resolves a display string. Input without any recognizable text is returned unchanged."""
    if value is None:
        return ""
    if _is_quoted(value):
        return parse_string(value)

    macro = _split_macro(value)
    if macro:
        resolved = _resolve_macro(*macro)
        if resolved is not None:
            return resolved
    return value
