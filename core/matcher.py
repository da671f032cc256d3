"""
Class Matcher Module
Finds the reference utility classes whose declarations a target selector covers.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from core.selector_parser import class_name
from core.value_parsers import color_distance, is_color_property, is_variable, parse_color

logger = logging.getLogger(__name__)

Declaration = Tuple[str, str]


@dataclass
class MatchResult:
    selector: str
    variant: str
    covered_classes: List[str] = field(default_factory=list)
    missing: List[Declaration] = field(default_factory=list)

    @property
    def tailwind(self) -> str:
        return ' '.join(self.covered_classes)


def without_variables(props: Dict[str, str]) -> Dict[str, str]:
    return {prop: value for prop, value in props.items() if not is_variable(prop)}


def colors_match(a: str, b: str, color_delta: float) -> bool:
    x = parse_color(a)
    y = parse_color(b)
    if x is None or y is None:
        return a == b
    return color_distance(x, y) < color_delta


def is_subset(parent: Dict[str, str], child: Dict[str, str], color_delta: Optional[float] = None) -> bool:
    """
    True when every property of child is declared by parent with a matching value.

    Custom properties are ignored on both sides and an empty side never
    matches. With color_delta set, color properties match within that RGBA
    distance instead of requiring equal strings.
    """
    a = without_variables(parent)
    b = without_variables(child)
    if not a or not b:
        return False
    for prop, value in b.items():
        if prop not in a:
            return False
        if color_delta is not None and is_color_property(prop):
            if not colors_match(a[prop], value, color_delta):
                return False
        elif a[prop] != value:
            return False
    return True


class Matcher:
    def __init__(self, color_delta: float):
        self.color_delta = color_delta

    def filter_reference(self, reference_map: Dict[str, Dict[str, str]], target: Dict[str, str]) -> List[str]:
        """Reference selectors covering part of target, without duplicates or redundant classes."""
        candidates = [
            selector for selector, props in reference_map.items()
            if is_subset(target, props, self.color_delta)
        ]
        unique = []
        for selector in candidates:
            props = without_variables(reference_map[selector])
            if not any(without_variables(reference_map[kept]) == props for kept in unique):
                unique.append(selector)
        # anything implied by another selected class is redundant; strict equality here, no color fuzz
        return [
            selector for selector in unique
            if not any(
                other != selector and is_subset(reference_map[other], reference_map[selector])
                for other in unique
            )
        ]

    def match(self, reference_map: Dict[str, Dict[str, str]], target: Dict[str, str],
              selector: str, variant: str) -> MatchResult:
        order = {ref: index for index, ref in enumerate(reference_map)}
        selected = sorted(self.filter_reference(reference_map, target), key=order.__getitem__)
        covered = set()
        for ref in selected:
            covered.update(reference_map[ref])
        missing = [(prop, value) for prop, value in target.items() if prop not in covered]
        logger.debug(f"{selector} [{variant}]: {len(selected)} classes, {len(missing)} missing")
        return MatchResult(
            selector=selector,
            variant=variant,
            covered_classes=[class_name(ref) for ref in selected],
            missing=missing,
        )

    def match_variant(self, reference_map: Dict[str, Dict[str, str]], target_map: Dict[str, Dict[str, str]],
                      variant: str) -> List[MatchResult]:
        return [
            self.match(reference_map, props, selector, variant)
            for selector, props in target_map.items()
        ]
