"""
Default Tailwind Theme
The parts of the stock Tailwind theme that drive value normalization.
"""

from typing import Callable, Dict

DEFAULT_THEME: Dict[str, Dict[str, str]] = {
    'screens': {
        'sm': '640px',
        'md': '768px',
        'lg': '1024px',
        'xl': '1280px',
    },
    'spacing': {
        'px': '1px',
        '0': '0',
        '1': '0.25rem',
        '2': '0.5rem',
        '3': '0.75rem',
        '4': '1rem',
        '5': '1.25rem',
        '6': '1.5rem',
        '8': '2rem',
        '10': '2.5rem',
        '12': '3rem',
        '16': '4rem',
        '20': '5rem',
        '24': '6rem',
        '32': '8rem',
        '40': '10rem',
        '48': '12rem',
        '56': '14rem',
        '64': '16rem',
    },
    'fontSize': {
        'xs': '0.75rem',
        'sm': '0.875rem',
        'base': '1rem',
        'lg': '1.125rem',
        'xl': '1.25rem',
        '2xl': '1.5rem',
        '3xl': '1.875rem',
        '4xl': '2.25rem',
        '5xl': '3rem',
        '6xl': '4rem',
    },
    'lineHeight': {
        'none': '1',
        'tight': '1.25',
        'snug': '1.375',
        'normal': '1.5',
        'relaxed': '1.625',
        'loose': '2',
        '3': '.75rem',
        '4': '1rem',
        '5': '1.25rem',
        '6': '1.5rem',
        '7': '1.75rem',
        '8': '2rem',
        '9': '2.25rem',
        '10': '2.5rem',
    },
    'letterSpacing': {
        'tighter': '-0.05em',
        'tight': '-0.025em',
        'normal': '0',
        'wide': '0.025em',
        'wider': '0.05em',
        'widest': '0.1em',
    },
    'borderRadius': {
        'none': '0',
        'sm': '0.125rem',
        'default': '0.25rem',
        'md': '0.375rem',
        'lg': '0.5rem',
        'full': '9999px',
    },
    'borderWidth': {
        'default': '1px',
        '0': '0',
        '2': '2px',
        '4': '4px',
        '8': '8px',
    },
}

FRACTIONS = {
    '1/2': '50%',
    '1/3': '33.333333%',
    '2/3': '66.666667%',
    '1/4': '25%',
    '2/4': '50%',
    '3/4': '75%',
    '1/5': '20%',
    '2/5': '40%',
    '3/5': '60%',
    '4/5': '80%',
    '1/6': '16.666667%',
    '5/6': '83.333333%',
    '1/12': '8.333333%',
    '11/12': '91.666667%',
    'full': '100%',
}


def negative(scale: Dict[str, str]) -> Dict[str, str]:
    return {f'-{key}': f'-{value}' for key, value in scale.items() if value not in ('0', '0px')}


# theme keys Tailwind computes from the resolved spacing scale
SPACING_DERIVED: Dict[str, Callable[[Dict[str, str]], Dict[str, str]]] = {
    'width': lambda spacing: {'auto': 'auto', **spacing, **FRACTIONS, 'screen': '100vw'},
    'height': lambda spacing: {'auto': 'auto', **spacing, 'full': '100%', 'screen': '100vh'},
    'margin': lambda spacing: {'auto': 'auto', **spacing, **negative(spacing)},
    'padding': lambda spacing: dict(spacing),
    'gap': lambda spacing: dict(spacing),
}
