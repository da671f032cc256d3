"""
Conversion Errors
Structural failures that abort a whole CSS to Tailwind conversion.
"""


class ConversionError(ValueError):
    """Base class for errors raised while converting CSS to Tailwind classes."""


class UnsupportedMediaQueryError(ConversionError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f'unsupported media query: "{value}"')


class UnknownVariantError(ConversionError):
    def __init__(self, variant: str):
        self.variant = variant
        super().__init__(f'unknown variant in Tailwind: "{variant}"')


class TailwindConfigError(ConversionError):
    """Raised when a Tailwind config or reference stylesheet cannot be produced."""


class InvalidSelectorError(ConversionError):
    def __init__(self, selector: str, reason: str):
        self.selector = selector
        super().__init__(f'Invalid {reason} in "{selector}"')
