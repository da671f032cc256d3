"""
Design Scales
Breakpoint scales derived from a resolved Tailwind theme, cached per configuration.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from core.options import ConverterOptions
from core.value_parsers import parse_size
from tailwind.config_reader import TailwindConfigReader

logger = logging.getLogger(__name__)

_SCALE_CACHE: Dict[str, 'DesignScales'] = {}


@dataclass(frozen=True)
class DesignScales:
    screens: Tuple[Tuple[float, str], ...] = ()
    font_size: Tuple[float, ...] = ()
    line_height: Tuple[float, ...] = ()
    letter_spacing: Tuple[float, ...] = ()
    border_radius: Tuple[float, ...] = ()
    border_width: Tuple[float, ...] = ()
    width: Tuple[float, ...] = ()
    height: Tuple[float, ...] = ()
    margin: Tuple[float, ...] = ()
    padding: Tuple[float, ...] = ()
    gap: Tuple[float, ...] = ()
    rem: float = 16
    em: float = 16

    @property
    def screen_breakpoints(self) -> Tuple[float, ...]:
        return tuple(px for px, _ in self.screens)

    def screen_name(self, px: float) -> Optional[str]:
        for size, name in self.screens:
            if size == px:
                return name
        return None


def get_breakpoints(data: Dict[str, Any], options: ConverterOptions) -> Tuple[float, ...]:
    """Sorted pixel values of a theme scale; non-length entries are dropped."""
    values = [parse_size(val, options) for val in data.values() if isinstance(val, (str, int, float))]
    return tuple(sorted(num for num in values if isinstance(num, (int, float))))


def round_to_scale(num: float, breakpoints: Tuple[float, ...]) -> float:
    """
    Snap a number to the nearest breakpoint.

    Numbers outside the scale's range are returned unchanged. On equal
    distance the lower breakpoint wins.
    """
    if not breakpoints or num < breakpoints[0] or num > breakpoints[-1]:
        return num
    best = breakpoints[0]
    for size in breakpoints:
        if abs(size - num) < abs(best - num):
            best = size
    return best


def _screen_sizes(screens: Dict[str, Union[str, Dict[str, str]]], options: ConverterOptions) -> Tuple[Tuple[float, str], ...]:
    result = {}
    for name, value in screens.items():
        if isinstance(value, dict):
            value = value.get('min')
        if not isinstance(value, str):
            continue
        px = parse_size(value, options)
        if isinstance(px, (int, float)) and px not in result:
            result[px] = name
    return tuple(sorted(result.items()))


def build_scales(theme: Dict[str, Any], options: ConverterOptions) -> DesignScales:
    return DesignScales(
        screens=_screen_sizes(theme.get('screens', {}), options),
        font_size=get_breakpoints(theme.get('fontSize', {}), options),
        line_height=get_breakpoints(theme.get('lineHeight', {}), options),
        letter_spacing=get_breakpoints(theme.get('letterSpacing', {}), options),
        border_radius=tuple(num for num in get_breakpoints(theme.get('borderRadius', {}), options) if num < 100),
        border_width=get_breakpoints(theme.get('borderWidth', {}), options),
        width=get_breakpoints(theme.get('width', {}), options),
        height=get_breakpoints(theme.get('height', {}), options),
        margin=get_breakpoints(theme.get('margin', {}), options),
        padding=get_breakpoints(theme.get('padding', {}), options),
        gap=get_breakpoints(theme.get('gap', {}), options),
        rem=options.rem,
        em=options.em,
    )


def get_scales(options: ConverterOptions) -> DesignScales:
    """Scales for the given options, computed once per structural config key."""
    key = options.theme_key()
    scales = _SCALE_CACHE.get(key)
    if scales is None:
        logger.debug("Building design scales for a new configuration")
        reader = TailwindConfigReader()
        theme = reader.extract_theme(reader.load(options.tailwind_config))
        scales = build_scales(theme, options)
        _SCALE_CACHE[key] = scales
    return scales


def clear_scale_cache() -> None:
    _SCALE_CACHE.clear()
