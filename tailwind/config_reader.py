"""
Tailwind Config Reader Module
Reads Tailwind configuration files and resolves them against the default theme.
"""

import copy
import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional, Union

from core.errors import TailwindConfigError
from tailwind.default_theme import DEFAULT_THEME, SPACING_DERIVED

logger = logging.getLogger(__name__)


class TailwindConfigReader:
    def __init__(self):
        self.config = {}

    def read_config(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Read tailwind.config.js (through Node.js) or a JSON config file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise TailwindConfigError(f'Tailwind config not found: {config_path}')
        if config_path.suffix == '.json':
            logger.info(f"Reading JSON config: {config_path}")
            with open(config_path, 'r', encoding='utf-8') as f:
                try:
                    self.config = json.load(f)
                except json.JSONDecodeError as e:
                    raise TailwindConfigError(f'Invalid JSON in Tailwind config {config_path}: {e}') from e
            return self.config
        self.config = self.parse_config(str(config_path.resolve()))
        return self.config

    def parse_config(self, config_path: str) -> Dict[str, Any]:
        """Parse tailwind.config.js using Node.js and return as dict."""
        node_script_path = config_path.replace('\\', '\\\\')
        node_script = f"""
        const config = require('{node_script_path}');
        console.log(JSON.stringify(config));
        """
        try:
            result = subprocess.run(['node', '-e', node_script], capture_output=True, text=True, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.error(f"Failed to parse config {config_path}: {e}")
            raise TailwindConfigError(f'Could not load Tailwind config {config_path}: {e}') from e
        try:
            config = json.loads(result.stdout.strip() or '{}')
        except json.JSONDecodeError as e:
            logger.error(f"Node printed invalid JSON for {config_path}: {result.stdout[:200]}")
            raise TailwindConfigError(f'Could not read Tailwind config {config_path}: {e}') from e
        logger.debug(f"Parsed config from {config_path}: {config}")
        return config

    def load(self, tailwind_config: Optional[Union[Dict[str, Any], str]]) -> Dict[str, Any]:
        """Accept a config dict, a path, or None (stock theme)."""
        if tailwind_config is None:
            self.config = {}
        elif isinstance(tailwind_config, dict):
            self.config = tailwind_config
        else:
            self.read_config(tailwind_config)
        return self.config

    def extract_theme(self, config: Optional[Dict[str, Any]] = None) -> Dict[str, Dict[str, Any]]:
        """
        Resolve the theme of a config against the default theme.

        Top-level theme keys replace the defaults, theme.extend keys are merged
        on top. Spacing-derived keys (width, height, margin, padding, gap) are
        rebuilt from the resolved spacing unless the config sets them.
        """
        config = self.config if config is None else config
        theme = config.get('theme', {}) if isinstance(config, dict) else {}
        extend = theme.get('extend', {}) if isinstance(theme, dict) else {}
        resolved = copy.deepcopy(DEFAULT_THEME)
        for key, value in theme.items():
            if key != 'extend' and isinstance(value, dict):
                resolved[key] = copy.deepcopy(value)
        for key, derive in SPACING_DERIVED.items():
            if not isinstance(theme.get(key), dict):
                resolved[key] = derive(resolved['spacing'])
        for key, value in extend.items():
            if not isinstance(value, dict):
                continue
            if key == 'spacing':
                # extended spacing also flows into the derived scales
                for derived_key in SPACING_DERIVED:
                    if not isinstance(theme.get(derived_key), dict):
                        resolved[derived_key].update(value)
            resolved[key] = {**resolved.get(key, {}), **value}
        logger.debug(f"Resolved theme keys: {list(resolved.keys())}")
        return resolved
