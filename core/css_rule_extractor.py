"""
CSS Rule Extractor
Walks stylesheets with tinycss2 and groups declarations by variant and base selector.
"""

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import tinycss2

from core.errors import InvalidSelectorError
from core.selector_parser import (
    MIN_WIDTH_PATTERN,
    class_name,
    decompose,
    is_selector_list,
    tokenize_selector,
)
from tailwind.scales import DesignScales

logger = logging.getLogger(__name__)

Declaration = Tuple[str, str]
RuleKey = Tuple[str, Optional[str]]
GroupedDeclarations = Dict[str, Dict[str, List[Declaration]]]

# utilities the matcher cannot reproduce reliably
UNSUPPORTED_REFERENCE_SELECTORS = re.compile(
    r'container|w-2\\/|w-3\\/|w-4\\/|w-5\\/|w-6\\/|w-7\\/|w-8\\/|w-9\\/|w-10\\/|w-11\\/'
)


@dataclass
class RuleRecord:
    selector: str
    at_rule_name: Optional[str] = None
    at_rule_params: Optional[str] = None
    declarations: List[Declaration] = field(default_factory=list)


def is_supported_reference_rule(selector: str) -> bool:
    """Only single class selectors (plus pseudos) are usable as Tailwind utilities."""
    if not selector.startswith('.'):
        return False
    if UNSUPPORTED_REFERENCE_SELECTORS.search(selector):
        return False
    if is_selector_list(selector):
        return False
    try:
        tokens = tokenize_selector(selector)
    except InvalidSelectorError:
        return False
    return len([token for token in tokens if token.type != 'pseudo']) == 1


class CSSRuleExtractor:
    def parse_css(self, css_content: str) -> Dict[RuleKey, RuleRecord]:
        """
        Parse CSS into (selector, media params) -> RuleRecord.

        Top-level rules and rules directly inside @media are kept; rules in any
        other at-rule (@keyframes, @font-face, @supports, ...) are skipped.
        Repeated rules with the same key append their declarations.
        """
        stylesheet = tinycss2.parse_stylesheet(css_content, skip_comments=True, skip_whitespace=True)
        records: Dict[RuleKey, RuleRecord] = OrderedDict()
        for rule in stylesheet:
            if rule.type == 'qualified-rule':
                self._add_rule(records, rule)
            elif rule.type == 'at-rule' and rule.lower_at_keyword == 'media' and rule.content:
                media_query = tinycss2.serialize(rule.prelude).strip()
                for subrule in tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True):
                    if subrule.type == 'qualified-rule':
                        self._add_rule(records, subrule, 'media', media_query)
            elif rule.type == 'at-rule':
                logger.debug(f"Skipping @{rule.lower_at_keyword} rule")
        return records

    def _add_rule(self, records, rule, at_rule_name=None, at_rule_params=None):
        selector = tinycss2.serialize(rule.prelude).strip()
        key = (selector, at_rule_params)
        if key not in records:
            records[key] = RuleRecord(selector, at_rule_name, at_rule_params)
        declarations = tinycss2.parse_declaration_list(rule.content, skip_comments=True, skip_whitespace=True)
        for decl in declarations:
            if decl.type == 'declaration':
                prop = decl.name if decl.name.startswith('--') else decl.lower_name
                records[key].declarations.append((prop, tinycss2.serialize(decl.value).strip()))

    def parse_reference_css(self, css_content: str) -> Dict[RuleKey, RuleRecord]:
        records = self.parse_css(css_content)
        return OrderedDict(
            (key, record) for key, record in records.items()
            if is_supported_reference_rule(record.selector)
        )

    def group_by_variant(self, records: Dict[RuleKey, RuleRecord], scales: DesignScales) -> GroupedDeclarations:
        """variant key -> base selector -> declarations, in source order."""
        grouped: GroupedDeclarations = OrderedDict()
        for record in records.values():
            if record.at_rule_params and not MIN_WIDTH_PATTERN.search(record.at_rule_params):
                logger.debug(f"Skipping {record.selector} in unsupported media query {record.at_rule_params}")
                continue
            decomposition = decompose(record.selector, record.at_rule_params, scales)
            selectors = grouped.setdefault(decomposition.variant_key, OrderedDict())
            selectors.setdefault(decomposition.base_selector, []).extend(record.declarations)
        return grouped

    def property_map(self, css_content: str) -> Dict[str, int]:
        """
        Group single class rules by the ordered list of properties they declare.
        Classes declaring the same property list share an index.
        """
        class_props: Dict[str, List[str]] = OrderedDict()
        for record in self.parse_css(css_content).values():
            try:
                tokens = tokenize_selector(record.selector)
            except InvalidSelectorError:
                continue
            if is_selector_list(record.selector) or len(tokens) != 1 or tokens[0].type != 'class':
                continue
            class_props[class_name(record.selector)] = [prop for prop, _ in record.declarations]
        result = {}
        prop_sets: List[List[str]] = []
        for name, props in class_props.items():
            if props in prop_sets:
                index = prop_sets.index(props)
            else:
                index = len(prop_sets)
                prop_sets.append(props)
            result[name] = index
        return result
