# pin_parser/pin_property_parser.py
"""
Decoding of one ``CustomProperties Pin (...)`` attribute list into a PinProperty.

The attribute list is split into (key, raw value) pairs, every pair is handed
to the setter registered for its key, and once all attributes are applied the
implicit default of the pin type is filled in when the editor left it out.
"""
import logging
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from .defaults import (
    backfill_default_value,
    decode_default_object,
    decode_default_text,
    decode_default_value,
)
from .loctext import parse_localized_text
from .pins import ContainerType, ControlTag, PinCategory, PinDirection, PinLink, PinProperty
from .splitter import iter_attributes, split_top_level, strip_enclosing_parens
from .utils import parse_bool, parse_string, parse_sub_category_object, prettify_text

logger = logging.getLogger(__name__)

Setter = Callable[[PinProperty, str], None]

EMPTY_STRUCT_TOKEN = "()"


def parse_linked_to(value: str) -> List[PinLink]:
    """
    (K2Node_A 11AA,K2Node_B 22BB,) -> [PinLink(K2Node_A, 11AA), PinLink(K2Node_B, 22BB)]
    Each entry must split on single spaces into exactly node name and pin id.
    """
    links = []
    for entry in strip_enclosing_parens(value).split(','):
        parts = entry.strip().split(' ')
        if len(parts) != 2:
            if entry.strip():
                logger.debug(f"Dropped malformed LinkedTo entry '{entry.strip()}'")
            continue
        links.append(PinLink(node_name=parts[0].strip('"'), pin_id=parts[1]))
    return links


def parse_parent_pin(value: str) -> Optional[PinLink]:
    parts = parse_string(value).split()
    if len(parts) != 2:
        return None
    return PinLink(node_name=parts[0].strip('"'), pin_id=parts[1])


def parse_sub_pins(value: str) -> List[str]:
    """SubPins=(K2Node_0 ABC,K2Node_0 DEF,) keeps the pin ids, in order."""
    pin_ids = []
    for entry in split_top_level(strip_enclosing_parens(value)):
        parts = entry.split()
        if parts:
            pin_ids.append(parts[-1])
    return pin_ids


def parse_pin_category(value: str) -> Optional[PinCategory]:
    token = parse_string(value)
    category = PinCategory.from_token(token)
    if category is None and token:
        logger.info(f"Unknown pin category '{token}'")
    return category


def parse_direction(value: str) -> PinDirection:
    if parse_string(value) == PinDirection.OUTPUT.value:
        return PinDirection.OUTPUT
    return PinDirection.INPUT


def parse_container_type(pin: PinProperty, value: str) -> ContainerType:
    token = parse_string(value)
    if token and token != ContainerType.NONE.value:
        logger.info(f"Found interesting attribute 'PinType.ContainerType' for which a value other than 'None' "
                    f"was set. PinType.ContainerType='{token}' [pin-name: {pin.name}]")
    try:
        return ContainerType(token)
    except ValueError:
        return ContainerType.NONE


def parse_value_type(pin: PinProperty, value: str) -> Optional[str]:
    """PinValueType=(TerminalCategory="int",...) -> int. Only maps carry a value type."""
    if not value or value == EMPTY_STRUCT_TOKEN:
        return None
    logger.info(f"Found interesting attribute 'PinType.PinValueType' for which a value other than '()' "
                f"was set. PinType.PinValueType='{value}' [pin-name: {pin.name}]")
    for segment in split_top_level(strip_enclosing_parens(value)):
        key, sep, terminal = segment.partition('=')
        if sep and key.strip() == "TerminalCategory":
            return parse_string(terminal) or None
    return None


def _log_member_reference(pin: PinProperty, value: str) -> None:
    if value and value != EMPTY_STRUCT_TOKEN:
        logger.info(f"Found interesting attribute 'PinType.PinSubCategoryMemberReference' for which a value "
                    f"other than '()' was set. PinType.PinSubCategoryMemberReference='{value}' [pin-name: {pin.name}]")


def _set_default_value(pin: PinProperty, value: str) -> None:
    pin.set_default(*decode_default_value(pin, value))


def _set_default_object(pin: PinProperty, value: str) -> None:
    class_name = decode_default_object(value)
    if class_name:
        pin.set_default(class_name, ControlTag.TEXT)


def _set_default_text(pin: PinProperty, value: str) -> None:
    pin.set_default(decode_default_text(value), ControlTag.TEXT)


def _set_value_type(pin: PinProperty, value: str) -> None:
    pin.value_type = parse_value_type(pin, value)


def _flag(attribute: str) -> Setter:
    def setter(pin: PinProperty, value: str) -> None:
        setattr(pin, attribute, parse_bool(value))
    return setter


def _ignore(pin: PinProperty, value: str) -> None:
    pass


class PinPropertyParser:
    """Stateless; a single instance can decode pins from any number of threads."""

    _ATTRIBUTE_PARSERS: Mapping[str, Setter] = MappingProxyType({
        "PinId": lambda p, v: setattr(p, "id", parse_string(v)),
        "PinName": lambda p, v: setattr(p, "name", prettify_text(parse_string(v))),
        "PinFriendlyName": lambda p, v: setattr(p, "friendly_name", prettify_text(parse_localized_text(v))),
        "PinToolTip": lambda p, v: setattr(p, "tool_tip", parse_string(v)),
        "Direction": lambda p, v: setattr(p, "direction", parse_direction(v)),
        "PinType.PinCategory": lambda p, v: setattr(p, "category", parse_pin_category(v)),
        "PinType.PinSubCategory": lambda p, v: setattr(p, "sub_category", parse_string(v) or None),
        "PinType.PinSubCategoryObject": lambda p, v: setattr(p, "sub_category_object", parse_sub_category_object(v)),
        "PinType.PinSubCategoryMemberReference": _log_member_reference,
        "PinType.PinValueType": _set_value_type,
        "PinType.ContainerType": lambda p, v: setattr(p, "container_type", parse_container_type(p, v)),
        "PinType.bIsReference": _flag("is_reference"),
        "PinType.bIsConst": _flag("is_const"),
        "PinType.bIsWeakPointer": _flag("is_weak_pointer"),
        "PinType.bIsUObjectWrapper": _flag("is_uobject_wrapper"),
        "PinType.bSerializeAsSinglePrecisionFloat": _ignore,
        "DefaultValue": _set_default_value,
        "DefaultObject": _set_default_object,
        "DefaultTextValue": _set_default_text,
        "AutogeneratedDefaultValue": lambda p, v: setattr(p, "autogenerated_default_value", parse_string(v)),
        "LinkedTo": lambda p, v: setattr(p, "linked_to", parse_linked_to(v)),
        "SubPins": lambda p, v: setattr(p, "sub_pins", parse_sub_pins(v)),
        "ParentPin": lambda p, v: setattr(p, "parent_pin", parse_parent_pin(v)),
        "PersistentGuid": lambda p, v: setattr(p, "persistent_guid", parse_string(v)),
        "bHidden": _flag("hidden"),
        "bNotConnectable": _flag("not_connectable"),
        "bDefaultValueIsReadOnly": _flag("default_value_is_read_only"),
        "bDefaultValueIsIgnored": _flag("default_value_is_ignored"),
        "bAdvancedView": _flag("advanced_view"),
        "bOrphanedPin": _flag("orphaned_pin"),
    })

    @classmethod
    def known_attributes(cls) -> List[str]:
        return list(cls._ATTRIBUTE_PARSERS)

    def parse(self, property_data: str, node_name: str = "") -> PinProperty:
        pin = PinProperty(node_name=node_name)

        for key, value in iter_attributes(property_data):
            setter = self._ATTRIBUTE_PARSERS.get(key)
            if setter is None:
                logger.info(f"Didn't parse property attribute '{key}'. There isn't a matching parser.")
                continue
            try:
                setter(pin, value)
            except (ValueError, TypeError, AttributeError, IndexError) as e:
                logger.warning(f"Failed to decode attribute '{key}' with value '{value[:80]}' "
                               f"on node '{node_name}': {e}", exc_info=True)

        backfill_default_value(pin)
        return pin


_DEFAULT_PARSER = PinPropertyParser()


def parse_pin(property_data: str, node_name: str = "") -> PinProperty:
    return _DEFAULT_PARSER.parse(property_data, node_name)
