"""
Value Parsers
Size and color parsing shared by the normalizer and the matcher.
"""

import re
from typing import List, Optional, Sequence, Union

import numpy as np
from tinycss2 import color3

from core.options import ConverterOptions

SIZE_PATTERN = re.compile(r'([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)([a-z%]*)')


def format_number(num: float) -> str:
    """Render 16.0 as "16" and 25.6 as "25.6"."""
    num = float(num)
    if num.is_integer():
        return str(int(num))
    return repr(round(num, 6))


def parse_size(value: Union[str, float], options: ConverterOptions) -> Union[float, str]:
    """
    Convert a CSS length to pixels.

    "0" becomes 0, px/rem/em lengths become numbers. Anything else
    (percentages, keywords, unitless numbers) is returned unchanged.
    """
    if isinstance(value, (int, float)):
        return value
    if value.strip() == '0':
        return 0
    match = SIZE_PATTERN.fullmatch(value.strip().lower())
    if not match:
        return value
    num, unit = match.groups()
    if unit == 'px':
        return float(num)
    elif unit == 'rem':
        return float(num) * options.rem
    elif unit == 'em':
        return float(num) * options.em
    return value


def parse_percentage(value: str) -> Optional[float]:
    match = SIZE_PATTERN.fullmatch(value.strip().lower())
    if match and match.group(2) == '%':
        return float(match.group(1))
    return None


def parse_color(value: str) -> Optional[List[float]]:
    """Parse any CSS color into [r, g, b, a] with r/g/b in 0-255 and a in 0-1."""
    rgba = color3.parse_color(value.strip())
    # currentColor comes back as a plain string
    if rgba is None or isinstance(rgba, str):
        return None
    red, green, blue, alpha = rgba
    return [round(red * 255), round(green * 255), round(blue * 255), round(alpha, 6)]


def format_color(rgba: Sequence[float]) -> str:
    return f"rgba({', '.join(format_number(c) for c in rgba)})"


def color_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return float(np.linalg.norm(np.subtract(a, b, dtype=float)))


def is_color_property(prop: str) -> bool:
    return 'color' in prop and not prop.startswith('--')


def is_variable(prop: str) -> bool:
    return prop.startswith('--')
