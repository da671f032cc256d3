"""
Shorthand Expansion
Table of shorthand properties and the longhands each one sets.
"""

import re
from collections import OrderedDict
from typing import Callable, Dict, List, Optional, Tuple

import tinycss2
from tinycss2 import color3

SIDES = ('top', 'right', 'bottom', 'left')
CSS_WIDE_KEYWORDS = {'inherit', 'initial', 'unset', 'revert'}

BORDER_STYLES = {'none', 'hidden', 'dotted', 'dashed', 'solid', 'double', 'groove', 'ridge', 'inset', 'outset'}
BORDER_WIDTHS = {'thin', 'medium', 'thick'}
FONT_STYLES = {'italic', 'oblique'}
FONT_VARIANTS = {'small-caps'}
FONT_WEIGHTS = {'bold', 'bolder', 'lighter'}
FONT_SIZES = {'xx-small', 'x-small', 'small', 'medium', 'large', 'x-large', 'xx-large', 'larger', 'smaller'}
SYSTEM_FONTS = {'caption', 'icon', 'menu', 'message-box', 'small-caption', 'status-bar'}
BACKGROUND_REPEATS = {'repeat', 'repeat-x', 'repeat-y', 'no-repeat', 'space', 'round'}
BACKGROUND_ATTACHMENTS = {'scroll', 'fixed', 'local'}
IMAGE_FUNCTIONS = {'url', 'linear-gradient', 'radial-gradient', 'repeating-linear-gradient',
                   'repeating-radial-gradient', 'conic-gradient', 'image-set'}

LENGTH_PATTERN = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([a-z]+|%)?')

Declaration = Tuple[str, str]
Expander = Callable[[str], Optional[List[Declaration]]]


def split_value(value: str) -> List[str]:
    """Split a value on top-level whitespace, keeping functions like rgb(...) whole."""
    parts, current = [], []
    for token in tinycss2.parse_component_value_list(value, skip_comments=True):
        if token.type == 'whitespace':
            if current:
                parts.append(tinycss2.serialize(current))
                current = []
        else:
            current.append(token)
    if current:
        parts.append(tinycss2.serialize(current))
    return parts


def is_length(part: str) -> bool:
    match = LENGTH_PATTERN.fullmatch(part.lower())
    return bool(match) and (match.group(2) is not None or float(match.group(1)) == 0)


def is_color(part: str) -> bool:
    return color3.parse_color(part) is not None


def box_expander(template: str) -> Expander:
    """margin: 1rem 2rem -> margin-top, margin-right, margin-bottom, margin-left."""
    def expand(value: str) -> Optional[List[Declaration]]:
        parts = split_value(value)
        if not 1 <= len(parts) <= 4:
            return None
        top = parts[0]
        right = parts[1] if len(parts) > 1 else top
        bottom = parts[2] if len(parts) > 2 else top
        left = parts[3] if len(parts) > 3 else right
        return [(template.format(side), part) for side, part in zip(SIDES, (top, right, bottom, left))]
    return expand


def border_parts(value: str) -> Optional[Dict[str, str]]:
    found = {}
    for part in split_value(value):
        lowered = part.lower()
        if 'style' not in found and lowered in BORDER_STYLES:
            found['style'] = part
        elif 'width' not in found and (lowered in BORDER_WIDTHS or is_length(part)):
            found['width'] = part
        elif 'color' not in found and is_color(part):
            found['color'] = part
        else:
            return None
    return found


def border_expander(sides=SIDES, prefix='border') -> Expander:
    """border: 1px solid red -> per side width, style and color (only the parts given)."""
    def expand(value: str) -> Optional[List[Declaration]]:
        found = border_parts(value)
        if found is None:
            return None
        result = []
        for kind in ('width', 'style', 'color'):
            if kind in found:
                result.extend((f'{prefix}-{side}-{kind}' if side else f'{prefix}-{kind}', found[kind]) for side in sides)
        return result
    return expand


def expand_background(value: str) -> Optional[List[Declaration]]:
    result = OrderedDict()
    position = []
    for part in split_value(value):
        lowered = part.lower()
        function = lowered.split('(', 1)[0]
        if function in IMAGE_FUNCTIONS or lowered == 'none':
            result['background-image'] = part
        elif lowered in BACKGROUND_REPEATS:
            result['background-repeat'] = part
        elif lowered in BACKGROUND_ATTACHMENTS:
            result['background-attachment'] = part
        elif is_color(part):
            result['background-color'] = part
        else:
            position.append(part)
    if position:
        result['background-position'] = ' '.join(position)
    return list(result.items())


def expand_font(value: str) -> Optional[List[Declaration]]:
    parts = split_value(value)
    if len(parts) == 1 and parts[0].lower() in SYSTEM_FONTS:
        return None
    result = OrderedDict()
    index = 0
    while index < len(parts):
        lowered = parts[index].lower()
        if lowered in FONT_STYLES:
            result['font-style'] = parts[index]
        elif lowered in FONT_VARIANTS:
            result['font-variant'] = parts[index]
        elif lowered in FONT_WEIGHTS or re.fullmatch(r'[1-9]00', lowered):
            result['font-weight'] = parts[index]
        elif lowered == 'normal':
            pass
        else:
            break
        index += 1
    if index >= len(parts):
        return None
    size = parts[index]
    line_height = None
    if '/' in size:
        size, line_height = (piece.strip() for piece in size.split('/', 1))
        if not line_height and index + 1 < len(parts):
            index += 1
            line_height = parts[index]
    elif index + 1 < len(parts) and parts[index + 1].startswith('/'):
        index += 1
        line_height = parts[index][1:].strip()
        if not line_height and index + 1 < len(parts):
            index += 1
            line_height = parts[index]
    if not (size.lower() in FONT_SIZES or is_length(size)):
        return None
    result['font-size'] = size
    if line_height:
        result['line-height'] = line_height
    # the family is everything after the size / line-height part
    family_parts = parts[index + 1:]
    if not family_parts:
        return None
    result['font-family'] = ' '.join(family_parts)
    return list(result.items())


def expand_flex(value: str) -> Optional[List[Declaration]]:
    parts = split_value(value)
    keywords = {
        'none': ('0', '0', 'auto'),
        'auto': ('1', '1', 'auto'),
        'initial': ('0', '1', 'auto'),
    }
    if len(parts) == 1 and parts[0].lower() in keywords:
        grow, shrink, basis = keywords[parts[0].lower()]
    elif all(re.fullmatch(r'\d+\.?\d*', part) for part in parts[:2]) and 1 <= len(parts) <= 3:
        grow = parts[0]
        shrink = parts[1] if len(parts) > 1 else '1'
        basis = parts[2] if len(parts) > 2 else '0%'
    elif len(parts) == 1:
        grow, shrink, basis = '1', '1', parts[0]
    elif len(parts) == 2 and re.fullmatch(r'\d+\.?\d*', parts[0]):
        grow, shrink, basis = parts[0], '1', parts[1]
    else:
        return None
    return [('flex-grow', grow), ('flex-shrink', shrink), ('flex-basis', basis)]


SHORTHANDS: Dict[str, Expander] = {
    'margin': box_expander('margin-{}'),
    'padding': box_expander('padding-{}'),
    'border-width': box_expander('border-{}-width'),
    'border-style': box_expander('border-{}-style'),
    'border-color': box_expander('border-{}-color'),
    'border': border_expander(),
    'border-top': border_expander(('top',)),
    'border-right': border_expander(('right',)),
    'border-bottom': border_expander(('bottom',)),
    'border-left': border_expander(('left',)),
    'outline': border_expander((None,), prefix='outline'),
    'background': expand_background,
    'font': expand_font,
    'flex': expand_flex,
}

LONGHANDS: Dict[str, List[str]] = {
    'margin': [f'margin-{side}' for side in SIDES],
    'padding': [f'padding-{side}' for side in SIDES],
    'border-width': [f'border-{side}-width' for side in SIDES],
    'border-style': [f'border-{side}-style' for side in SIDES],
    'border-color': [f'border-{side}-color' for side in SIDES],
    'border': [f'border-{side}-{kind}' for kind in ('width', 'style', 'color') for side in SIDES],
    **{f'border-{side}': [f'border-{side}-{kind}' for kind in ('width', 'style', 'color')] for side in SIDES},
    'outline': ['outline-width', 'outline-style', 'outline-color'],
    'background': ['background-color', 'background-image', 'background-repeat',
                   'background-attachment', 'background-position'],
    'font': ['font-style', 'font-variant', 'font-weight', 'font-size', 'line-height', 'font-family'],
    'flex': ['flex-grow', 'flex-shrink', 'flex-basis'],
}


def expand_shorthand(prop: str, value: str) -> List[Declaration]:
    """Longhand declarations for one declaration; non-shorthands come back as-is."""
    expander = SHORTHANDS.get(prop)
    if expander is None:
        return [(prop, value)]
    if value.strip().lower() in CSS_WIDE_KEYWORDS:
        return [(longhand, value.strip()) for longhand in LONGHANDS[prop]]
    expanded = expander(value)
    if expanded is None:
        return [(prop, value)]
    return expanded


def expand_declarations(declarations: List[Declaration]) -> List[Declaration]:
    """Expand every shorthand; a later declaration of a longhand replaces an earlier one."""
    result: Dict[str, str] = OrderedDict()
    for prop, value in declarations:
        for longhand, longhand_value in expand_shorthand(prop, value):
            result[longhand] = longhand_value
    return list(result.items())
