# pin_parser/colors.py

from typing import Dict, Optional, Tuple

from .pins import Color, PinCategory, PinProperty, StructClass


# Wire colours per category, matching the editor's default palette
PIN_COLORS: Dict[PinCategory, str] = {
    PinCategory.BOOL: 'rgb(146, 1, 1)',
    PinCategory.FLOAT: 'rgb(158, 250, 68)',
    PinCategory.REAL: 'rgb(158, 250, 68)',
    PinCategory.NAME: 'rgb(150, 97, 185)',
    PinCategory.OBJECT: 'rgb(0, 133, 191)',
}
STRUCT_PIN_COLORS: Dict[str, str] = {
    StructClass.VECTOR: 'rgb(253, 200, 35)',
    StructClass.ROTATOR: 'rgb(159, 178, 253)',
}
DEFAULT_STRUCT_PIN_COLOR = 'rgb(0, 88, 200)'
DEFAULT_PIN_COLOR = 'rgb(230, 230, 230)'


def linear_to_srgb(channel: float) -> float:
    """sRGB transfer function for one linear channel in [0, 1]."""
    channel = min(max(channel, 0.0), 1.0)
    if channel <= 0.0031308:
        return channel * 12.92
    return 1.055 * (channel ** (1.0 / 2.4)) - 0.055


def gamma_correct(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """Takes linear channels on a 0..255 scale and returns displayable 8-bit sRGB."""
    return tuple(int(round(linear_to_srgb(c / 255.0) * 255)) for c in (r, g, b))


def color_from_linear(r: float, g: float, b: float, a: Optional[float] = None) -> Color:
    """Builds a Color from FLinearColor components (each 0..1)."""
    r, g, b = r * 255, g * 255, b * 255
    alpha = 1.0 if a is None else a
    return Color(r=r, g=g, b=b, a=alpha, gamma_corrected=gamma_correct(r, g, b))


def get_pin_color(pin: PinProperty) -> str:
    if pin.category is PinCategory.STRUCT:
        return STRUCT_PIN_COLORS.get(pin.struct_class or "", DEFAULT_STRUCT_PIN_COLOR)
    return PIN_COLORS.get(pin.category, DEFAULT_PIN_COLOR)
