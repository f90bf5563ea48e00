# --- START OF FILE pin_parser/defaults.py ---

# pin_parser/defaults.py
import logging
from typing import Dict, List, Optional, Tuple

from .colors import color_from_linear
from .loctext import parse_localized_text
from .pins import ControlTag, DefaultValue, PinCategory, PinProperty, StructClass, StructMember
from .splitter import split_top_level, strip_enclosing_parens
from .utils import (
    get_class_friendly_name,
    is_number,
    parse_bool,
    parse_string,
    prettify_text,
    remove_insignificant_trailing_zeros,
)

logger = logging.getLogger(__name__)

VECTOR_AXES = ("X", "Y", "Z")
VECTOR_LIKE_STRUCTS = {StructClass.VECTOR, StructClass.VECTOR3F, StructClass.ROTATOR}

# Display names for engine enums whose literal differs from what the editor shows.
# Enums missing here (including user defined ones) fall back to a prettified literal.
KNOWN_ENUMS: Dict[str, Dict[str, str]] = {
    "/Script/Engine.EDrawDebugTrace": {
        "None": "None",
        "ForOneFrame": "For One Frame",
        "ForDuration": "For Duration",
        "Persistent": "Persistent",
    },
    "/Script/Engine.ETraceTypeQuery": {
        "TraceTypeQuery1": "Visibility",
        "TraceTypeQuery2": "Camera",
    },
    "/Script/Engine.EObjectTypeQuery": {
        "ObjectTypeQuery1": "WorldStatic",
        "ObjectTypeQuery2": "WorldDynamic",
        "ObjectTypeQuery3": "Pawn",
        "ObjectTypeQuery4": "PhysicsBody",
        "ObjectTypeQuery5": "Vehicle",
        "ObjectTypeQuery6": "Destructible",
    },
    "/Script/Engine.ECollisionChannel": {
        "ECC_WorldStatic": "WorldStatic",
        "ECC_WorldDynamic": "WorldDynamic",
        "ECC_Pawn": "Pawn",
        "ECC_Visibility": "Visibility",
        "ECC_Camera": "Camera",
        "ECC_PhysicsBody": "PhysicsBody",
        "ECC_Vehicle": "Vehicle",
        "ECC_Destructible": "Destructible",
    },
    "/Script/Engine.EMovementMode": {
        "MOVE_None": "None",
        "MOVE_Walking": "Walking",
        "MOVE_NavWalking": "Navmesh Walking",
        "MOVE_Falling": "Falling",
        "MOVE_Swimming": "Swimming",
        "MOVE_Flying": "Flying",
        "MOVE_Custom": "Custom",
    },
    "/Script/Engine.ESpawnActorCollisionHandlingMethod": {
        "Undefined": "Default",
        "AlwaysSpawn": "Always Spawn, Ignore Collisions",
        "AdjustIfPossibleButAlwaysSpawn": "Try To Adjust Location, But Always Spawn",
        "AdjustIfPossibleButDontSpawnIfColliding": "Try To Adjust Location, Don't Spawn If Still Colliding",
        "DontSpawnIfColliding": "Do Not Spawn",
    },
}


def resolve_enum_display_name(enum_path: str, literal: str) -> str:
    """EDrawDebugTrace + ForOneFrame -> For One Frame; EMyEnum::NewEnumerator0 -> New Enumerator0."""
    members = KNOWN_ENUMS.get(enum_path)
    if members and literal in members:
        return members[literal]
    if '::' in literal:
        literal = literal.split('::', 1)[1]
    return prettify_text(literal) or literal


def _struct_segments(raw: str) -> List[str]:
    return [s for s in split_top_level(strip_enclosing_parens(parse_string(raw))) if s]


def decode_struct_members(raw: str) -> List[StructMember]:
    """(TagName="Damage.Fire",Extra=1.500000) -> [TagName=Damage.Fire, Extra=1.5]"""
    members = []
    for index, segment in enumerate(_struct_segments(raw)):
        key, sep, value = segment.partition('=')
        if not sep:
            # Positional entry without a key
            key, value = str(index), segment
        value = parse_string(value.strip())
        members.append(StructMember(key.strip(), remove_insignificant_trailing_zeros(value)))
    return members


def decode_vector(raw: str) -> List[StructMember]:
    """(X=1.000000,Y=2.000000,Z=0.000000) or 1.000000,2.000000,0.000000 -> X=1, Y=2, Z=0"""
    members = []
    for axis, segment in zip(VECTOR_AXES, _struct_segments(raw)):
        _, sep, number = segment.partition('=')
        value = number if sep else segment
        members.append(StructMember(axis, remove_insignificant_trailing_zeros(value.strip())))
    return members


def decode_linear_color(raw: str):
    components = []
    for member in decode_struct_members(raw):
        if is_number(member.value):
            components.append(float(member.value))
        if len(components) == 4:
            break
    r, g, b = (components + [0.0, 0.0, 0.0])[:3]
    a = components[3] if len(components) > 3 else None
    return color_from_linear(r, g, b, a)


def decode_struct(struct_class: Optional[str], raw: str) -> Tuple[DefaultValue, ControlTag]:
    if struct_class in VECTOR_LIKE_STRUCTS:
        return decode_vector(raw), ControlTag.STRUCT_BOX
    if struct_class == StructClass.LINEAR_COLOR:
        return decode_linear_color(raw), ControlTag.COLOR_BOX
    return decode_struct_members(raw), ControlTag.STRUCT_BOX


def decode_default_value(pin: PinProperty, raw: str) -> Tuple[DefaultValue, ControlTag]:
    """Decodes a DefaultValue token according to the pin's (already decoded) category."""
    category = pin.category
    if category in (PinCategory.FLOAT, PinCategory.REAL):
        return remove_insignificant_trailing_zeros(parse_string(raw)), ControlTag.TEXT
    if category is PinCategory.BOOL:
        return parse_bool(raw), ControlTag.CHECKBOX
    if category is PinCategory.STRUCT:
        return decode_struct(pin.struct_class, raw)
    if category is PinCategory.BYTE and pin.enum_path:
        return resolve_enum_display_name(pin.enum_path, parse_string(raw)), ControlTag.TEXT
    if category is None:
        logger.debug(f"Default value '{raw[:40]}' seen before pin category [pin-name: {pin.name}]")
    return parse_string(raw), ControlTag.TEXT


def decode_default_object(raw: str) -> Optional[str]:
    return get_class_friendly_name(raw)


def decode_default_text(raw: str) -> str:
    return parse_localized_text(raw)


def backfill_default_value(pin: PinProperty) -> None:
    """
    The editor omits DefaultValue when the value equals the type's implicit
    default, so pins that still have none get that implicit default here.
    """
    if pin.has_default():
        return
    if pin.category is PinCategory.BOOL:
        pin.set_default(False, ControlTag.CHECKBOX)
    elif pin.category is PinCategory.STRING:
        pin.set_default("", ControlTag.TEXT)
    elif pin.category is PinCategory.STRUCT and pin.struct_class == StructClass.VECTOR2D:
        pin.set_default([StructMember("X", "0"), StructMember("Y", "0")], ControlTag.STRUCT_BOX)

# --- END OF FILE pin_parser/defaults.py ---
