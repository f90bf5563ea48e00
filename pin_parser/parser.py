# --- START OF FILE pin_parser/parser.py ---

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .colors import get_pin_color
from .pin_property_parser import PinPropertyParser
from .pins import PinProperty
from .splitter import KEY_REGEX
from .utils import extract_simple_name_from_path, parse_string

logger = logging.getLogger(__name__)

BEGIN_OBJECT_CLASS_REGEX = re.compile(r'Class=([^\s\'"]+)')
BEGIN_OBJECT_NAME_REGEX = re.compile(r'Name="([^"]+)"')
PIN_LINE_REGEX = re.compile(r'CustomProperties\s+Pin\s*\((.*)\)\s*$', re.IGNORECASE | re.DOTALL)


@dataclass
class Node:
    name: str
    class_path: Optional[str] = None
    guid: Optional[str] = None
    position: tuple = (0, 0)
    comment: Optional[str] = None
    pins: List[PinProperty] = field(default_factory=list)
    raw_properties: Dict[str, str] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return extract_simple_name_from_path(self.class_path) or "Unknown"

    def get_pin(self, pin_id: str) -> Optional[PinProperty]:
        return next((p for p in self.pins if p.id == pin_id), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "class": self.class_path,
            "guid": self.guid,
            "position": list(self.position),
            "comment": self.comment,
            "pins": [dict(p.to_dict(), color=get_pin_color(p)) for p in self.pins],
        }


def _to_int(value: Optional[str]) -> int:
    try:
        return int(float(value or 0))
    except ValueError:
        return 0


class BlueprintParser:
    """
    Reads copied Blueprint text (Begin Object / End Object blocks) and decodes
    every CustomProperties Pin line of a node with PinPropertyParser.
    Node layout and drawing are left to the caller.
    """

    def __init__(self, pin_parser: Optional[PinPropertyParser] = None):
        self.pin_parser = pin_parser or PinPropertyParser()
        self.nodes: List[Node] = []
        self.stats: Dict[str, Any] = {}
        self._reset_state()

    def _reset_state(self):
        self.nodes = []
        self.stats = {
            "total_nodes": 0,
            "total_pins": 0,
            "total_links_found": 0,
            "links_resolved": 0,
            "links_unresolved": 0,
            "node_types": {},
            "pin_categories": {},
        }

    def parse(self, text: str) -> List[Node]:
        """Parses the input blueprint text into a list of Node objects, in source order."""
        self._reset_state()
        object_stack: List[Dict[str, Any]] = []

        for line_num, line in enumerate(text.strip().splitlines(), start=1):
            stripped_line = line.strip()
            if not stripped_line:
                continue

            if stripped_line.startswith("Begin Object"):
                class_match = BEGIN_OBJECT_CLASS_REGEX.search(stripped_line)
                name_match = BEGIN_OBJECT_NAME_REGEX.search(stripped_line)
                object_stack.append({
                    "line_num": line_num,
                    "class_path": class_match.group(1).strip("'") if class_match else None,
                    "name": name_match.group(1) if name_match else None,
                    "property_lines": [],
                })
            elif stripped_line.startswith("End Object"):
                if not object_stack:
                    logger.warning(f"Line {line_num}: Found 'End Object' without matching 'Begin'.")
                    continue
                self._finalize_node(object_stack.pop(), nested=bool(object_stack))
            elif object_stack:
                object_stack[-1]["property_lines"].append(stripped_line)

        if object_stack:
            logger.warning(f"Reached end of text with {len(object_stack)} unclosed Object block(s). Processing remaining.")
            while object_stack:
                self._finalize_node(object_stack.pop(), nested=bool(object_stack))

        self._count_links()
        return self.nodes

    def _finalize_node(self, node_data: Dict[str, Any], nested: bool):
        name = node_data["name"]
        # Sub-objects (e.g. timeline templates) are not graph nodes
        if nested:
            return
        if not name or not node_data["class_path"]:
            missing = "Name" if not name else "Class"
            logger.warning(f"Skipping object at line {node_data['line_num']} due to missing {missing}")
            return

        node = Node(name=name, class_path=node_data["class_path"])
        for line in node_data["property_lines"]:
            self._handle_property_line(line, node)

        node.guid = parse_string(node.raw_properties.get("NodeGuid")) or name
        node.position = (_to_int(node.raw_properties.get("NodePosX")),
                         _to_int(node.raw_properties.get("NodePosY")))
        if "NodeComment" in node.raw_properties:
            node.comment = parse_string(node.raw_properties["NodeComment"])

        self.nodes.append(node)
        self.stats["total_nodes"] += 1
        self.stats["total_pins"] += len(node.pins)
        self.stats["node_types"][node.node_type] = self.stats["node_types"].get(node.node_type, 0) + 1
        for pin in node.pins:
            cat_key = pin.category.value if pin.category else "Unknown"
            self.stats["pin_categories"][cat_key] = self.stats["pin_categories"].get(cat_key, 0) + 1

    def _handle_property_line(self, line: str, node: Node):
        pin_match = PIN_LINE_REGEX.match(line)
        if pin_match:
            node.pins.append(self.pin_parser.parse(pin_match.group(1).strip(), node.name))
            return

        key, sep, value = line.partition('=')
        key = key.strip().strip('"')
        if sep and KEY_REGEX.match(key):
            node.raw_properties[key] = value.strip()
        else:
            logger.debug(f"Ignored property line on node {node.name}: {line[:80]}")

    def _count_links(self):
        pins_by_node = {n.name: {p.id for p in n.pins} for n in self.nodes}
        found = resolved = 0
        for node in self.nodes:
            for pin in node.pins:
                for link in pin.linked_to:
                    found += 1
                    if link.pin_id in pins_by_node.get(link.node_name, ()):
                        resolved += 1
        self.stats["total_links_found"] = found
        self.stats["links_resolved"] = resolved
        self.stats["links_unresolved"] = found - resolved

# --- END OF FILE pin_parser/parser.py ---
