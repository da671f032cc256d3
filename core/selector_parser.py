"""
Selector Parser Module
Splits CSS selectors into a base selector and the Tailwind variants applied to it.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

import tinycss2

from core.errors import InvalidSelectorError, UnsupportedMediaQueryError
from core.options import ConverterOptions
from core.value_parsers import parse_size
from tailwind.scales import DesignScales, round_to_scale

DEFAULT_VARIANT = 'default'
VARIANT_SEPARATOR = ','

MIN_WIDTH_PATTERN = re.compile(r'min-width\s*:\s*([^)\s]+)', re.IGNORECASE)
COMBINATORS = {'>', '+', '~'}


@dataclass
class SelectorToken:
    type: str  # class, id, tag, universal, attribute, pseudo, combinator
    value: str
    text: str


@dataclass
class Decomposition:
    base_selector: str
    variants: List[str] = field(default_factory=list)

    @property
    def variant_key(self) -> str:
        return variant_key(self.variants)


def variant_key(variants: List[str]) -> str:
    """Canonical key for a set of variants; the base state maps to "default"."""
    unique = sorted(set(variants))
    if not unique:
        return DEFAULT_VARIANT
    return VARIANT_SEPARATOR.join(unique)


def is_selector_list(selector: str) -> bool:
    tokens = tinycss2.parse_component_value_list(selector, skip_comments=True)
    return any(token.type == 'literal' and token.value == ',' for token in tokens)


def tokenize_selector(selector: str) -> List[SelectorToken]:
    """Turn a single (non-list) selector into structural tokens, left to right."""
    result: List[SelectorToken] = []
    tokens = tinycss2.parse_component_value_list(selector, skip_comments=True)
    pending_space = False
    i = 0

    def push(token: SelectorToken):
        nonlocal pending_space
        if pending_space and result and result[-1].type != 'combinator':
            result.append(SelectorToken('combinator', ' ', ' '))
        pending_space = False
        result.append(token)

    while i < len(tokens):
        token = tokens[i]
        if token.type == 'whitespace':
            pending_space = True
        elif token.type == 'literal' and token.value in COMBINATORS:
            pending_space = False
            result.append(SelectorToken('combinator', token.value, token.value))
        elif token.type == 'literal' and token.value == '.':
            i += 1
            ident = tokens[i] if i < len(tokens) else None
            if ident is None or ident.type != 'ident':
                raise InvalidSelectorError(selector, 'class selector')
            push(SelectorToken('class', ident.value, '.' + ident.serialize()))
        elif token.type == 'hash':
            push(SelectorToken('id', token.value, token.serialize()))
        elif token.type == 'ident':
            push(SelectorToken('tag', token.value.lower(), token.serialize()))
        elif token.type == 'literal' and token.value == '*':
            push(SelectorToken('universal', '*', '*'))
        elif token.type == '[] block':
            push(SelectorToken('attribute', tinycss2.serialize(token.content).strip(), token.serialize()))
        elif token.type == 'literal' and token.value == ':':
            colons = ':'
            i += 1
            while i < len(tokens) and tokens[i].type == 'literal' and tokens[i].value == ':':
                colons += ':'
                i += 1
            name = tokens[i] if i < len(tokens) else None
            if name is None or name.type not in ('ident', 'function'):
                raise InvalidSelectorError(selector, 'pseudo selector')
            value = name.value if name.type == 'ident' else name.name
            push(SelectorToken('pseudo', value.lower(), colons + name.serialize()))
        else:
            push(SelectorToken('other', token.serialize(), token.serialize()))
        i += 1
    return result


def join_tokens(tokens: List[SelectorToken]) -> str:
    parts = []
    for token in tokens:
        if token.type == 'combinator' and token.value != ' ':
            parts.append(f' {token.text} ')
        else:
            parts.append(token.text)
    return ''.join(parts)


def pseudo_variant(name: str) -> Optional[str]:
    if name in ('hover', 'focus'):
        return name
    # ::placeholder, ::-moz-placeholder, :-ms-input-placeholder, ...
    if name.endswith('placeholder'):
        return 'placeholder'
    return None


def media_variant(media_params: str, scales: DesignScales) -> Optional[str]:
    """Breakpoint name for a "(min-width: ...)" media query, None when there is no min-width."""
    match = MIN_WIDTH_PATTERN.search(media_params)
    if not match:
        return None
    raw_value = match.group(1)
    px = parse_size(raw_value, ConverterOptions(rem=scales.rem, em=scales.em))
    if not isinstance(px, (int, float)):
        raise UnsupportedMediaQueryError(raw_value)
    name = scales.screen_name(round_to_scale(px, scales.screen_breakpoints))
    if name is None:
        raise UnsupportedMediaQueryError(raw_value)
    return name


def decompose(selector: str, media_params: Optional[str], scales: DesignScales) -> Decomposition:
    """
    Strip variant pseudos (hover, focus, placeholder) from the end of a selector
    and add the responsive variant from the media query, if any.
    """
    variants = []
    if media_params:
        breakpoint = media_variant(media_params, scales)
        if breakpoint:
            variants.append(breakpoint)
    if is_selector_list(selector):
        return Decomposition(selector.strip(), sorted(set(variants)))
    tokens = tokenize_selector(selector)
    end = len(tokens)
    while end > 0 and tokens[end - 1].type == 'pseudo':
        variant = pseudo_variant(tokens[end - 1].value)
        if variant is None:
            break
        variants.append(variant)
        end -= 1
    base = tokens[:end]
    # ".foo :hover" and ":hover" keep their subject as an explicit "*"
    if end < len(tokens) and (not base or base[-1].type == 'combinator'):
        base.append(SelectorToken('universal', '*', '*'))
    return Decomposition(join_tokens(base), sorted(set(variants)))


def class_name(selector: str) -> str:
    """Unescaped name of the first class in a selector: ".hover\\:bg-white" -> "hover:bg-white"."""
    for token in tokenize_selector(selector):
        if token.type == 'class':
            return token.value
    return selector.lstrip('.')
