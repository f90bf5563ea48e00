# --- START OF FILE pin_parser/utils.py ---

# pin_parser/utils.py
import re
from typing import Optional

from .pins import SubCategoryObject

# Object reference with a type prefix: Enum'/Script/Engine.EDrawDebugTrace'
# or the UE5 long form /Script/CoreUObject.Enum'/Script/Engine.EDrawDebugTrace'
# (the inner path may itself be wrapped in double quotes).
OBJECT_REF_REGEX = re.compile(r'^(?P<type>[A-Za-z0-9_./]+)\'"?(?P<path>[^\'"]*)"?\'$')
# Extracts the last component of a UE path string
CLEAN_NAME_REGEX = re.compile(r"[./:']([^./:']+)$")
# Numeric text such as 1.000000, -0.500000, 1e-05
NUMBER_REGEX = re.compile(r'^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$')
CAMEL_BOUNDARY_REGEX = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')

_TRUE_TOKEN = "true"


def parse_string(value: Optional[str]) -> str:
    """Strips surrounding double quotes and unescapes \\", \\' , \\n and \\\\."""
    if value is None:
        return ""
    value = value.strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    if '\\' not in value:
        return value

    out = []
    i = 0
    while i < len(value):
        char = value[i]
        if char == '\\' and i + 1 < len(value):
            nxt = value[i + 1]
            if nxt == 'n':
                out.append('\n')
            elif nxt == 'r':
                pass
            elif nxt == 't':
                out.append('\t')
            else:
                out.append(nxt)  # \" \' \\
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)


def parse_bool(value: Optional[str]) -> bool:
    """Case-insensitive True/False token. Anything else is False."""
    if value is None:
        return False
    return parse_string(value).lower() == _TRUE_TOKEN


def is_number(text: str) -> bool:
    return bool(NUMBER_REGEX.match(text.strip()))


def remove_insignificant_trailing_zeros(value: str) -> str:
    """
    1.000000 -> 1, 1.500000 -> 1.5, 0.000000 -> 0.
    Non-numeric text and integers are returned unchanged.
    """
    if not value:
        return value
    text = value.strip()
    if not is_number(text) or '.' not in text:
        return value

    mantissa, sep, exponent = text.partition('e') if 'e' in text else text.partition('E')
    mantissa = mantissa.rstrip('0').rstrip('.')
    if mantissa in ('', '-', '+'):
        mantissa = mantissa + '0'
    if mantissa in ('-0', '+0'):
        mantissa = '0'
    return f"{mantissa}{sep}{exponent}"


def prettify_text(text: Optional[str]) -> str:
    """
    Turns identifiers into display text the way the editor does:
    underscores become spaces and CamelCase words are separated
    (ReturnValue -> Return Value, In_Array -> In Array).
    """
    if not text:
        return ""
    if ' ' in text.strip():
        return text.strip()
    words = []
    for part in text.replace('_', ' ').split():
        words.extend(CAMEL_BOUNDARY_REGEX.split(part))
    words = [w for w in words if w]
    # Boolean properties: bIsValid -> Is Valid
    if len(words) > 1 and words[0] == 'b':
        words = words[1:]
    return " ".join(words)


def extract_simple_name_from_path(path: Optional[str]) -> Optional[str]:
    """Extracts the final component (class/struct/enum name) from a UE path string."""
    if not path:
        return None
    path_str = parse_string(str(path)).strip("'\"")

    match = CLEAN_NAME_REGEX.search(path_str)
    name = None
    if match:
        name = match.group(1).strip("'\"")
    elif '/' not in path_str and ':' not in path_str and '.' not in path_str:
        name = path_str

    if not name:
        return None
    # Generated blueprint classes carry a _C suffix
    if name.endswith('_C'):
        name = name[:-2]
    return name or None


def get_class_friendly_name(object_path: Optional[str]) -> Optional[str]:
    """DefaultObject="/Game/BP_Door.BP_Door_C" -> BP_Door. None values yield None."""
    if not object_path or parse_string(object_path) in ("None", ""):
        return None
    return extract_simple_name_from_path(object_path)


def parse_sub_category_object(value: str) -> Optional[SubCategoryObject]:
    """
    Enum'/Script/Engine.EDrawDebugTrace'            -> (Enum, /Script/Engine.EDrawDebugTrace)
    "/Script/CoreUObject.ScriptStruct'/Script/CoreUObject.Vector'" -> (ScriptStruct, /Script/CoreUObject.Vector)
    /Script/CoreUObject.Vector                       -> (None, /Script/CoreUObject.Vector)
    """
    text = parse_string(value)
    if not text or text == "None":
        return None

    match = OBJECT_REF_REGEX.match(text)
    if not match:
        return SubCategoryObject(type=None, class_path=text.strip("'\""))

    type_token = match.group('type')
    # Long form: take the class name after the last dot of the type path
    if '.' in type_token:
        type_token = type_token.rsplit('.', 1)[1]
    elif '/' in type_token:
        type_token = type_token.rsplit('/', 1)[1]
    return SubCategoryObject(type=type_token or None, class_path=match.group('path'))

# --- END OF FILE pin_parser/utils.py ---
