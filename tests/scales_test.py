import sys
import os
import json
import dataclasses
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.options import ConverterOptions
from tailwind import scales as scales_module
from tailwind.scales import DesignScales, build_scales, get_breakpoints, get_scales, round_to_scale

def test_round_ties_go_to_lower():
    assert round_to_scale(5, (0, 10)) == 0
    assert round_to_scale(6, (0, 4, 8, 12, 16)) == 4
    assert round_to_scale(7, (0, 4, 8, 12, 16)) == 8

def test_round_outside_range_is_unchanged():
    assert round_to_scale(-3, (0, 4, 8)) == -3
    assert round_to_scale(20, (0, 4, 8)) == 20
    assert round_to_scale(3, ()) == 3

def test_get_breakpoints_sorted_px():
    data = {'b': '1rem', 'a': '2px', 'auto': 'auto', 'half': '50%', 'zero': '0'}
    assert get_breakpoints(data, ConverterOptions()) == (0, 2, 16)

def test_default_scales():
    scales = get_scales(ConverterOptions())
    assert scales.screens == ((640, 'sm'), (768, 'md'), (1024, 'lg'), (1280, 'xl'))
    assert scales.border_radius == (0, 2, 4, 6, 8)
    assert scales.border_width == (0, 1, 2, 4, 8)
    assert 9999 not in scales.border_radius
    assert scales.margin[0] == -256
    assert scales.screen_name(768) == 'md'
    assert scales.screen_name(700) is None

def test_rem_option_changes_scales():
    scales = get_scales(ConverterOptions(rem=10))
    assert 15 in scales.padding
    assert scales.rem == 10

def test_screen_objects_with_min():
    theme = {'screens': {'tablet': {'min': '600px'}, 'print': {'raw': 'print'}, 'desktop': '75rem'}}
    scales = build_scales(theme, ConverterOptions())
    assert scales.screens == ((600, 'tablet'), (1200, 'desktop'))

def test_scales_cached_per_structural_key():
    first = get_scales(ConverterOptions(tailwind_config={'theme': {'spacing': {'1': '8px'}}}))
    second = get_scales(ConverterOptions(tailwind_config={'theme': {'spacing': {'1': '8px'}}}))
    assert first is second
    assert len(scales_module._SCALE_CACHE) == 1
    assert second.padding == (8,)

def test_config_override_changes_scales():
    scales = get_scales(ConverterOptions(tailwind_config={'theme': {'spacing': {'1': '8px', '2': '16px'}}}))
    assert scales.padding == (8, 16)
    assert scales.margin == (-16, -8, 8, 16)

def test_scales_hold_only_breakpoints():
    assert 'theme' not in {f.name for f in dataclasses.fields(DesignScales)}

def test_edited_config_file_rebuilds_scales(tmp_path):
    path = tmp_path / 'tailwind.json'
    path.write_text(json.dumps({'theme': {'spacing': {'1': '8px'}}}), encoding='utf-8')
    options = ConverterOptions(tailwind_config=str(path))
    assert get_scales(options).padding == (8,)
    path.write_text(json.dumps({'theme': {'spacing': {'1': '12px'}}}), encoding='utf-8')
    mtime = os.path.getmtime(path) + 10
    os.utime(path, (mtime, mtime))
    assert get_scales(options).padding == (12,)
