# pin_parser/splitter.py
"""
Bracket- and quote-aware splitting of pin attribute lists.

A pin line looks like::

    PinId=8F1A...,PinName="self",PinFriendlyName=NSLOCTEXT("K2Node", "Target", "Target"),LinkedTo=(K2Node_0 1A2B,)

Commas inside quoted strings and inside parentheses belong to the value, so
the list is cut with a small scanner instead of a regex.
"""
import logging
import re
from enum import Enum, auto
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

KEY_REGEX = re.compile(r'^[A-Za-z0-9_.]+$')


class ScanState(Enum):
    OUTSIDE = auto()
    IN_QUOTES = auto()
    IN_PARENS = auto()


class TopLevelScanner:
    """
    Walks text once, left to right, and reports the positions of separators
    that sit at paren depth 0 outside any double-quoted region.
    """

    def __init__(self, text: str, separator: str = ','):
        self.text = text
        self.separator = separator

    def separator_positions(self) -> Iterator[int]:
        state = ScanState.OUTSIDE
        depth = 0
        escaped = False

        for i, char in enumerate(self.text):
            if state is ScanState.IN_QUOTES:
                if escaped:
                    escaped = False
                elif char == '\\':
                    escaped = True
                elif char == '"':
                    state = ScanState.IN_PARENS if depth > 0 else ScanState.OUTSIDE
                continue

            if char == '"':
                state = ScanState.IN_QUOTES
            elif char == '(':
                depth += 1
                state = ScanState.IN_PARENS
            elif char == ')':
                if depth > 0:  # stray close-paren at top level is ignored
                    depth -= 1
                if depth == 0:
                    state = ScanState.OUTSIDE
            elif char == self.separator and state is ScanState.OUTSIDE:
                yield i

    def segments(self) -> List[str]:
        """Raw segments; ','.join(segments) == text."""
        parts = []
        start = 0
        for pos in self.separator_positions():
            parts.append(self.text[start:pos])
            start = pos + 1
        parts.append(self.text[start:])
        return parts


def split_top_level(text: str, separator: str = ',') -> List[str]:
    """Splits on separators at depth 0 outside quotes. Segments are stripped, empty ones kept."""
    if not text:
        return []
    return [s.strip() for s in TopLevelScanner(text, separator).segments()]


def strip_enclosing_parens(text: str) -> str:
    text = text.strip()
    if text.startswith('(') and text.endswith(')'):
        return text[1:-1].strip()
    return text


def _split_key_value(fragment: str) -> Tuple[str, str]:
    key, sep, value = fragment.partition('=')
    if not sep:
        return "", ""
    key = key.strip()
    # UE 5.2+ may quote keys
    if len(key) >= 2 and key.startswith('"') and key.endswith('"'):
        key = key[1:-1]
    if not KEY_REGEX.match(key):
        return "", ""
    return key, value.strip()


def iter_attributes(text: str) -> Iterator[Tuple[str, str]]:
    """
    Yields (key, raw_value) pairs in source order. Fragments without a usable
    key are logged and skipped; scanning always resumes after the next separator.
    """
    if not text:
        return
    for fragment in TopLevelScanner(text).segments():
        if not fragment.strip():
            continue  # trailing comma or ",,"
        key, value = _split_key_value(fragment)
        if not key:
            logger.warning(f"Skipped property attribute because invalid key: '{fragment.strip()[:80]}'")
            continue
        yield key, value


def split_attributes(text: str) -> List[Tuple[str, str]]:
    return list(iter_attributes(text))
