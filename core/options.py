"""
Converter Options
Immutable configuration threaded through every conversion call.
"""

import copy
import json
import os
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional, Union

DEFAULT_PREPROCESSOR_INPUT = '@tailwind base;\n\n@tailwind components;\n\n@tailwind utilities;'

# upper-case option names accepted from dict/JSON configs
OPTION_NAMES = {
    'COLOR_DELTA': 'color_delta',
    'FULL_ROUND': 'full_round',
    'REM': 'rem',
    'EM': 'em',
    'PREPROCESSOR_INPUT': 'preprocessor_input',
    'TAILWIND_CONFIG': 'tailwind_config',
}


@dataclass(frozen=True)
class ConverterOptions:
    color_delta: float = 2
    full_round: float = 9999
    rem: float = 16
    em: float = 16
    preprocessor_input: str = DEFAULT_PREPROCESSOR_INPUT
    # dict, path to a .json / tailwind.config.js file, or None for the default theme
    tailwind_config: Optional[Union[Dict[str, Any], str]] = None

    def __post_init__(self):
        # detach from the caller's dict so later mutation cannot leak into cached scales
        if isinstance(self.tailwind_config, dict):
            object.__setattr__(self, 'tailwind_config', copy.deepcopy(self.tailwind_config))

    @classmethod
    def from_dict(cls, options: Optional[Dict[str, Any]] = None) -> 'ConverterOptions':
        """Build options from a mapping of upper-case (or field) names, defaults filling the gaps."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in (options or {}).items():
            name = OPTION_NAMES.get(key, key)
            if name not in known:
                raise ValueError(f'Unknown option: {key}')
            kwargs[name] = value
        return cls(**kwargs)

    def config_mtime(self) -> Optional[float]:
        """Modification time of a path-valued config, None for dicts and missing files."""
        if not isinstance(self.tailwind_config, str):
            return None
        try:
            return os.path.getmtime(self.tailwind_config)
        except OSError:
            return None

    def cache_key(self) -> str:
        """Structural key used to memoize everything derived from these options."""
        return json.dumps({**asdict(self), 'config_mtime': self.config_mtime()}, sort_keys=True, default=str)

    def theme_key(self) -> str:
        """Structural key of the inputs that affect design scales."""
        return json.dumps({
            'rem': self.rem,
            'em': self.em,
            'tailwind_config': self.tailwind_config,
            'config_mtime': self.config_mtime(),
        }, sort_keys=True, default=str)


def as_options(options: Optional[Union[ConverterOptions, Dict[str, Any]]]) -> ConverterOptions:
    if options is None:
        return ConverterOptions()
    if isinstance(options, ConverterOptions):
        return options
    return ConverterOptions.from_dict(options)
