import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.css_rule_extractor import CSSRuleExtractor, is_supported_reference_rule
from core.options import ConverterOptions
from tailwind.scales import get_scales


@pytest.fixture
def extractor():
    return CSSRuleExtractor()


def test_parse_css_keeps_media_rules_separate(extractor):
    css = """
    /* comment */
    .foo { color: red; MARGIN: 0 }
    @media (min-width: 768px) { .foo { color: blue } }
    .foo { padding: 1px }
    """
    records = extractor.parse_css(css)
    assert list(records) == [('.foo', None), ('.foo', '(min-width: 768px)')]
    assert records[('.foo', None)].declarations == [('color', 'red'), ('margin', '0'), ('padding', '1px')]
    media = records[('.foo', '(min-width: 768px)')]
    assert media.at_rule_name == 'media'
    assert media.declarations == [('color', 'blue')]


def test_parse_css_skips_other_at_rules(extractor):
    css = """
    @keyframes spin { from { opacity: 0 } to { opacity: 1 } }
    @font-face { font-family: Foo; src: url(foo.woff) }
    @supports (display: grid) { .grid { display: grid } }
    .bar { display: block }
    """
    assert list(extractor.parse_css(css)) == [('.bar', None)]


def test_custom_property_names_keep_case(extractor):
    records = extractor.parse_css('.a { --Main-Color: red; COLOR: var(--Main-Color) }')
    assert records[('.a', None)].declarations == [('--Main-Color', 'red'), ('color', 'var(--Main-Color)')]


@pytest.mark.parametrize('selector, supported', [
    ('.p-6', True),
    (r'.hover\:bg-white:hover', True),
    ('.placeholder-gray-500::placeholder', True),
    ('.container', False),
    (r'.w-2\/3', False),
    (r'.w-1\/2', True),
    ('.a .b', False),
    ('.a > .b', False),
    ('.a, .b', False),
    ('div', False),
    ('*, ::before, ::after', False),
])
def test_is_supported_reference_rule(selector, supported):
    assert is_supported_reference_rule(selector) is supported


def test_parse_reference_css_filters(extractor, reference_css):
    selectors = [record.selector for record in extractor.parse_reference_css(reference_css).values()]
    assert '.container' not in selectors
    assert r'.w-2\/3' not in selectors
    assert '*, ::before, ::after' not in selectors
    assert '.p-6' in selectors
    assert r'.xl\:p-10' in selectors


def test_group_by_variant(extractor):
    css = """
    .foo { color: red }
    .foo:hover { color: blue }
    .foo:hover { margin: 0 }
    @media (min-width: 640px) { .foo:hover { padding: 0 } }
    @media print { .foo { display: none } }
    """
    grouped = extractor.group_by_variant(extractor.parse_css(css), get_scales(ConverterOptions()))
    assert grouped == {
        'default': {'.foo': [('color', 'red')]},
        'hover': {'.foo': [('color', 'blue'), ('margin', '0')]},
        'hover,sm': {'.foo': [('padding', '0')]},
    }


def test_placeholder_rules_merge_under_one_selector(extractor, reference_css):
    records = extractor.parse_reference_css(reference_css)
    grouped = extractor.group_by_variant(records, get_scales(ConverterOptions()))
    assert grouped['placeholder']['.placeholder-gray-500'] == [('color', '#a0aec0'), ('color', '#a0aec0')]
    assert '.focus\\:placeholder-gray-600' in grouped['focus,placeholder']


def test_property_map(extractor):
    css = '.a { color: red } .b { color: blue } .c { margin: 0 } .d:hover { color: red } .e { color: red; margin: 0 }'
    assert extractor.property_map(css) == {'a': 0, 'b': 0, 'c': 1, 'e': 2}
