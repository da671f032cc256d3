"""
Reference Stylesheet Compiler
Runs the preprocessor input through postcss + tailwindcss with Node.js.
"""

import json
import logging
import os
import subprocess
from typing import Optional

from core.errors import TailwindConfigError
from core.options import ConverterOptions

logger = logging.getLogger(__name__)

NODE_SCRIPT = """
const postcss = require('postcss');
const tailwindcss = require('tailwindcss');
const autoprefixer = require('autoprefixer');
const input = {input};
const config = {config};
postcss([config ? tailwindcss(config) : tailwindcss, autoprefixer])
    .process(input, {{ from: 'tailwind.css' }})
    .then((result) => process.stdout.write(result.css))
    .catch((error) => {{
        console.error(error);
        process.exit(1);
    }});
"""


def build_node_script(options: ConverterOptions) -> str:
    config = options.tailwind_config
    if isinstance(config, str):
        config = os.path.abspath(config)
    return NODE_SCRIPT.format(input=json.dumps(options.preprocessor_input), config=json.dumps(config))


def compile_reference_css(options: ConverterOptions, cwd: Optional[str] = None) -> str:
    """Compile the Tailwind reference stylesheet; needs postcss, tailwindcss and autoprefixer in node_modules."""
    logger.info("Compiling reference stylesheet with tailwindcss")
    try:
        result = subprocess.run(
            ['node', '-e', build_node_script(options)],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        stderr = getattr(e, 'stderr', '') or ''
        logger.error(f"Tailwind compilation failed: {e} {stderr}")
        raise TailwindConfigError(f'Could not compile the Tailwind reference stylesheet: {stderr or e}') from e
    logger.debug(f"Compiled reference stylesheet, length: {len(result.stdout)}")
    return result.stdout
