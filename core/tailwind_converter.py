"""
Tailwind Converter Module
Converts CSS rules into the Tailwind utility classes that reproduce them.
"""

import logging
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Tuple, Union

from core.css_rule_extractor import CSSRuleExtractor
from core.errors import UnknownVariantError
from core.matcher import Matcher, MatchResult
from core.normalizer import ClassMap, Normalizer
from core.options import ConverterOptions, as_options
from tailwind.compiler import compile_reference_css
from tailwind.scales import get_scales

logger = logging.getLogger(__name__)

REFERENCE_CACHE_SIZE = 8
_REFERENCE_CACHE: Dict[Tuple[str, str], Dict[str, ClassMap]] = OrderedDict()


def assemble(match_results: List[MatchResult]) -> List[Dict[str, Any]]:
    """Merge per-variant match results into one record per selector, in first-seen order."""
    merged: Dict[str, Dict[str, Any]] = OrderedDict()
    for result in match_results:
        entry = merged.setdefault(result.selector, {'selector': result.selector, 'tailwind': '', 'missing': {}})
        if result.tailwind:
            entry['tailwind'] = f"{entry['tailwind']} {result.tailwind}" if entry['tailwind'] else result.tailwind
        if result.missing:
            entry['missing'].setdefault(result.variant, []).extend(result.missing)
    return list(merged.values())


def clear_reference_cache() -> None:
    _REFERENCE_CACHE.clear()


class TailwindConverter:
    def __init__(self, options: Optional[Union[ConverterOptions, Dict[str, Any]]] = None):
        self.options = as_options(options)
        self.scales = get_scales(self.options)
        self.extractor = CSSRuleExtractor()
        self.normalizer = Normalizer(self.options, self.scales)
        self.matcher = Matcher(self.options.color_delta)

    def normalize_input(self, input_css: str) -> Dict[str, ClassMap]:
        records = self.extractor.parse_css(input_css)
        return self.normalizer.normalize(self.extractor.group_by_variant(records, self.scales))

    def normalize_reference(self, reference_css: str) -> Dict[str, ClassMap]:
        """Normalized reference classes, memoized per stylesheet and options."""
        key = (reference_css, self.options.cache_key())
        if key in _REFERENCE_CACHE:
            _REFERENCE_CACHE[key] = _REFERENCE_CACHE.pop(key)
            return _REFERENCE_CACHE[key]
        records = self.extractor.parse_reference_css(reference_css)
        logger.info(f"Reference stylesheet: {len(records)} supported rules")
        normalized = self.normalizer.normalize(self.extractor.group_by_variant(records, self.scales))
        _REFERENCE_CACHE[key] = normalized
        while len(_REFERENCE_CACHE) > REFERENCE_CACHE_SIZE:
            _REFERENCE_CACHE.pop(next(iter(_REFERENCE_CACHE)))
        return normalized

    def convert(self, input_css: str, reference_css: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Convert input CSS to Tailwind classes.

        Returns one {selector, tailwind, missing} dict per input selector. When
        no reference stylesheet is given it is compiled from the options'
        preprocessor input.
        """
        if reference_css is None:
            reference_css = compile_reference_css(self.options)
        reference = self.normalize_reference(reference_css)
        target = self.normalize_input(input_css)
        match_results: List[MatchResult] = []
        for variant, target_map in target.items():
            reference_map = reference.get(variant)
            if reference_map is None:
                raise UnknownVariantError(variant)
            match_results.extend(self.matcher.match_variant(reference_map, target_map, variant))
        results = assemble(match_results)
        logger.info(f"Converted {len(results)} selectors, {sum(1 for r in results if r['missing'])} with missing declarations")
        return results


def css_to_tailwind(input_css: str, reference_css: Optional[str] = None,
                    options: Optional[Union[ConverterOptions, Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
    return TailwindConverter(options).convert(input_css, reference_css)
