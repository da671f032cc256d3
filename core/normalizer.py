"""
Normalizer Module
Brings declarations onto the Tailwind design scales so they can be compared.
"""

import logging
import re
from collections import OrderedDict
from typing import Callable, Dict, Iterable, List, Tuple

from core.options import ConverterOptions
from core.shorthands import SIDES, expand_declarations
from core.value_parsers import (
    format_color,
    format_number,
    is_color_property,
    is_variable,
    parse_color,
    parse_percentage,
    parse_size,
)
from tailwind.scales import DesignScales, round_to_scale

logger = logging.getLogger(__name__)

Declaration = Tuple[str, str]
ClassMap = Dict[str, Dict[str, str]]

# border-radius above this many pixels is treated as fully rounded
FULL_ROUND_THRESHOLD = 100
FULL_ROUND_PERCENT = 50

VAR_PATTERN = re.compile(r'var\(\s*(--[\w-]+)\s*\)')


class Normalizer:
    def __init__(self, options: ConverterOptions, scales: DesignScales):
        self.options = options
        self.scales = scales
        self.steps: List[Callable[[List[Declaration]], List[Declaration]]] = [
            self._rounding_step(['line-height'], scales.line_height),
            self._rounding_step(['letter-spacing'], scales.letter_spacing),
            self._rounding_step(['font-size'], scales.font_size),
            self.normalize_colors,
            self.normalize_border_radius,
            self._rounding_step(['border-width'] + [f'border-{side}-width' for side in SIDES], scales.border_width),
            self._side_collapse_step('border-color', [f'border-{side}-color' for side in SIDES]),
            self._side_collapse_step('border-style', [f'border-{side}-style' for side in SIDES]),
            self._rounding_step(['width'], scales.width),
            self._rounding_step(['height'], scales.height),
            self._rounding_step(['margin'] + [f'margin-{side}' for side in SIDES], scales.margin),
            self._rounding_step(['padding'] + [f'padding-{side}' for side in SIDES], scales.padding),
            self._rounding_step(['gap'], scales.gap),
        ]

    def round_size(self, value: str, breakpoints: Tuple[float, ...]) -> str:
        px = parse_size(value, self.options)
        if isinstance(px, str):
            return value
        return f"{format_number(round_to_scale(px, breakpoints))}px"

    def _rounding_step(self, props: Iterable[str], breakpoints: Tuple[float, ...]):
        prop_set = set(props)

        def step(declarations: List[Declaration]) -> List[Declaration]:
            return [
                (prop, self.round_size(value, breakpoints) if prop in prop_set else value)
                for prop, value in declarations
            ]
        return step

    def normalize_colors(self, declarations: List[Declaration]) -> List[Declaration]:
        result = []
        for prop, value in declarations:
            if is_color_property(prop):
                rgba = parse_color(value)
                if rgba is not None:
                    value = format_color(rgba)
            result.append((prop, value))
        return result

    def normalize_border_radius(self, declarations: List[Declaration]) -> List[Declaration]:
        full_round = f"{format_number(self.options.full_round)}px"
        result = []
        for prop, value in declarations:
            if prop == 'border-radius':
                px = parse_size(value, self.options)
                percent = parse_percentage(value) if isinstance(px, str) else None
                if isinstance(px, (int, float)) and px > FULL_ROUND_THRESHOLD:
                    value = full_round
                elif percent is not None and percent >= FULL_ROUND_PERCENT:
                    value = full_round
                else:
                    value = self.round_size(value, self.scales.border_radius)
            result.append((prop, value))
        return result

    def _side_collapse_step(self, unified: str, side_props: List[str]):
        """border-top-color ... border-left-color -> border-color, only when all four sides agree."""
        side_set = set(side_props)

        def step(declarations: List[Declaration]) -> List[Declaration]:
            sides = {prop: value for prop, value in declarations if prop in side_set}
            if len(sides) != len(side_props) or len(set(sides.values())) != 1:
                return declarations
            result = []
            emitted = False
            for prop, value in declarations:
                if prop in side_set:
                    if not emitted:
                        result.append((unified, sides[side_props[0]]))
                        emitted = True
                    continue
                result.append((prop, value))
            return result
        return step

    def resolve_local_variables(self, declarations: List[Declaration]) -> List[Declaration]:
        """Substitute var(--x) with --x declared in the same rule; no cascade, no recursion."""
        variables = OrderedDict((prop, value) for prop, value in declarations if is_variable(prop))
        if not variables:
            return declarations

        def repl(match):
            name = match.group(1)
            return variables.get(name, match.group(0))
        return [(prop, VAR_PATTERN.sub(repl, value)) for prop, value in declarations]

    def normalize_values(self, declarations: List[Declaration]) -> List[Declaration]:
        for step in self.steps:
            declarations = step(declarations)
        return declarations

    def normalize_rule(self, declarations: List[Declaration]) -> Dict[str, str]:
        declarations = self.resolve_local_variables(declarations)
        declarations = expand_declarations(declarations)
        declarations = self.normalize_values(declarations)
        return dict(declarations)

    def normalize(self, grouped: Dict[str, Dict[str, List[Declaration]]]) -> Dict[str, ClassMap]:
        """variant -> selector -> declarations  ==>  variant -> selector -> {property: value}"""
        result = OrderedDict()
        for variant, selectors in grouped.items():
            result[variant] = OrderedDict(
                (selector, self.normalize_rule(declarations)) for selector, declarations in selectors.items()
            )
            logger.debug(f"Normalized {len(selectors)} selectors for variant {variant}")
        return result
