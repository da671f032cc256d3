import sys
import os
import dataclasses
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.options import DEFAULT_PREPROCESSOR_INPUT, ConverterOptions, as_options

def test_defaults():
    options = ConverterOptions()
    assert options.color_delta == 2
    assert options.full_round == 9999
    assert options.rem == 16
    assert options.em == 16
    assert options.preprocessor_input == DEFAULT_PREPROCESSOR_INPUT
    assert options.tailwind_config is None

def test_from_dict_upper_case_names():
    options = ConverterOptions.from_dict({'COLOR_DELTA': 5, 'REM': 10, 'em': 12})
    assert options.color_delta == 5
    assert options.rem == 10
    assert options.em == 12
    assert options.full_round == 9999

def test_from_dict_rejects_unknown():
    with pytest.raises(ValueError, match='Unknown option'):
        ConverterOptions.from_dict({'COLOUR_DELTA': 5})

def test_options_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ConverterOptions().rem = 10

def test_config_dict_is_copied():
    config = {'theme': {'spacing': {'1': '8px'}}}
    options = ConverterOptions(tailwind_config=config)
    config['theme']['spacing']['1'] = '4px'
    assert options.tailwind_config['theme']['spacing']['1'] == '8px'

def test_cache_keys_are_structural():
    a = ConverterOptions(tailwind_config={'theme': {'a': 1, 'b': 2}})
    b = ConverterOptions(tailwind_config={'theme': {'b': 2, 'a': 1}})
    assert a.cache_key() == b.cache_key()
    assert a.theme_key() == b.theme_key()
    assert ConverterOptions(color_delta=3).theme_key() == ConverterOptions().theme_key()
    assert ConverterOptions(color_delta=3).cache_key() != ConverterOptions().cache_key()

def test_as_options():
    options = ConverterOptions(rem=8)
    assert as_options(options) is options
    assert as_options(None) == ConverterOptions()
    assert as_options({'FULL_ROUND': 100}).full_round == 100

def test_path_config_keys_follow_file_edits(tmp_path):
    path = tmp_path / 'tailwind.json'
    path.write_text('{}', encoding='utf-8')
    options = ConverterOptions(tailwind_config=str(path))
    theme_key, cache_key = options.theme_key(), options.cache_key()
    mtime = os.path.getmtime(path) + 10
    os.utime(path, (mtime, mtime))
    assert options.theme_key() != theme_key
    assert options.cache_key() != cache_key

def test_missing_config_path_has_no_mtime():
    assert ConverterOptions(tailwind_config='/nowhere/tailwind.config.js').config_mtime() is None
    assert ConverterOptions(tailwind_config={'theme': {}}).config_mtime() is None
