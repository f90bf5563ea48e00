from .parser import BlueprintParser, Node
from .pin_property_parser import PinPropertyParser, parse_pin
from .pins import (
    Color,
    ContainerType,
    ControlTag,
    PinCategory,
    PinDirection,
    PinLink,
    PinProperty,
    StructMember,
    SubCategoryObject,
)

__all__ = [
    "BlueprintParser",
    "Color",
    "ContainerType",
    "ControlTag",
    "Node",
    "PinCategory",
    "PinDirection",
    "PinLink",
    "PinProperty",
    "PinPropertyParser",
    "StructMember",
    "SubCategoryObject",
    "parse_pin",
]
