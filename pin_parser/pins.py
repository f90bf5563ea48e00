# pin_parser/pins.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class PinCategory(Enum):
    EXEC = "exec"
    OBJECT = "object"
    INT = "int"
    STRING = "string"
    FLOAT = "float"
    STRUCT = "struct"
    CLASS = "class"
    BOOL = "bool"
    DELEGATE = "delegate"
    NAME = "name"
    WILDCARD = "wildcard"
    BYTE = "byte"
    # Categories emitted by UE5 editors
    REAL = "real"
    INT64 = "int64"
    TEXT = "text"
    INTERFACE = "interface"
    SOFT_OBJECT = "softobject"
    SOFT_CLASS = "softclass"
    MC_DELEGATE = "mcdelegate"
    FIELD_PATH = "fieldpath"

    @classmethod
    def from_token(cls, token: str) -> Optional["PinCategory"]:
        try:
            return cls(token)
        except ValueError:
            return None


class PinDirection(Enum):
    INPUT = "EGPD_Input"
    OUTPUT = "EGPD_Output"


class ContainerType(Enum):
    NONE = "None"
    ARRAY = "Array"
    SET = "Set"
    MAP = "Map"


class ControlTag(Enum):
    """Editor widget that should present a decoded default value."""
    TEXT = "text"
    CHECKBOX = "checkbox"
    STRUCT_BOX = "struct-box"
    COLOR_BOX = "color-box"


class StructClass:
    VECTOR = "/Script/CoreUObject.Vector"
    VECTOR3F = "/Script/CoreUObject.Vector3f"
    VECTOR2D = "/Script/CoreUObject.Vector2D"
    ROTATOR = "/Script/CoreUObject.Rotator"
    LINEAR_COLOR = "/Script/CoreUObject.LinearColor"


@dataclass(frozen=True)
class PinLink:
    node_name: str
    pin_id: str


@dataclass(frozen=True)
class StructMember:
    key: str
    value: str


@dataclass(frozen=True)
class SubCategoryObject:
    """Reference such as Enum'/Script/Engine.EDrawDebugTrace' split into type and class path."""
    type: Optional[str]
    class_path: str


@dataclass(frozen=True)
class Color:
    r: float  # linear, 0..255
    g: float
    b: float
    a: float  # 0..1
    gamma_corrected: Tuple[int, int, int]

    def css(self) -> str:
        r, g, b = self.gamma_corrected
        return f"rgba({r}, {g}, {b}, {self.a:g})"


DefaultValue = Union[bool, str, List[StructMember], Color]

# Categories that carry a meaningful sub-category object
_SUB_CATEGORY_OBJECT_CATEGORIES = (PinCategory.STRUCT, PinCategory.BYTE)


@dataclass
class PinProperty:
    node_name: str = ""
    id: Optional[str] = None
    name: Optional[str] = None
    friendly_name: Optional[str] = None
    category: Optional[PinCategory] = None
    direction: PinDirection = PinDirection.INPUT
    tool_tip: Optional[str] = None
    sub_category: Optional[str] = None
    sub_category_object: Optional[SubCategoryObject] = None
    is_reference: bool = False
    is_const: bool = False
    is_weak_pointer: bool = False
    is_uobject_wrapper: bool = False
    hidden: bool = False
    default_value_is_ignored: bool = False
    default_value_is_read_only: bool = False
    advanced_view: bool = False
    orphaned_pin: bool = False
    not_connectable: bool = False
    default_value: Optional[DefaultValue] = None
    default_value_control: Optional[ControlTag] = None
    autogenerated_default_value: Optional[str] = None
    persistent_guid: Optional[str] = None
    container_type: ContainerType = ContainerType.NONE
    value_type: Optional[str] = None
    linked_to: List[PinLink] = field(default_factory=list)
    sub_pins: List[str] = field(default_factory=list)
    parent_pin: Optional[PinLink] = None

    def set_default(self, value: DefaultValue, control: ControlTag) -> None:
        self.default_value = value
        self.default_value_control = control

    def has_default(self) -> bool:
        return self.default_value_control is not None

    @property
    def display_name(self) -> str:
        return self.friendly_name or self.name or ""

    @property
    def struct_class(self) -> Optional[str]:
        if self.category is PinCategory.STRUCT and self.sub_category_object:
            return self.sub_category_object.class_path
        return None

    @property
    def enum_path(self) -> Optional[str]:
        obj = self.sub_category_object
        if self.category is PinCategory.BYTE and obj and obj.type == "Enum":
            return obj.class_path
        return None

    def is_input(self) -> bool:
        return self.direction is PinDirection.INPUT

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation."""
        default: Any = self.default_value
        if isinstance(default, Color):
            default = {"r": default.r, "g": default.g, "b": default.b, "a": default.a,
                       "css": default.css()}
        elif isinstance(default, list):
            default = [{"key": m.key, "value": m.value} for m in default]

        sub_obj = None
        if self.sub_category_object and self.category in _SUB_CATEGORY_OBJECT_CATEGORIES:
            sub_obj = {"type": self.sub_category_object.type,
                       "class": self.sub_category_object.class_path}

        return {
            "node_name": self.node_name,
            "id": self.id,
            "name": self.name,
            "friendly_name": self.friendly_name,
            "category": self.category.value if self.category else None,
            "direction": "input" if self.is_input() else "output",
            "tool_tip": self.tool_tip,
            "sub_category": self.sub_category,
            "sub_category_object": sub_obj,
            "is_reference": self.is_reference,
            "is_const": self.is_const,
            "is_weak_pointer": self.is_weak_pointer,
            "is_uobject_wrapper": self.is_uobject_wrapper,
            "hidden": self.hidden,
            "default_value_is_ignored": self.default_value_is_ignored,
            "default_value_is_read_only": self.default_value_is_read_only,
            "advanced_view": self.advanced_view,
            "orphaned_pin": self.orphaned_pin,
            "not_connectable": self.not_connectable,
            "default_value": default,
            "default_value_control": self.default_value_control.value if self.default_value_control else None,
            "autogenerated_default_value": self.autogenerated_default_value,
            "persistent_guid": self.persistent_guid,
            "container_type": self.container_type.value,
            "value_type": self.value_type,
            "linked_to": [{"node_name": l.node_name, "pin_id": l.pin_id} for l in self.linked_to],
            "sub_pins": list(self.sub_pins),
            "parent_pin": ({"node_name": self.parent_pin.node_name, "pin_id": self.parent_pin.pin_id}
                           if self.parent_pin else None),
        }
