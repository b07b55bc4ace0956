class DigifyError(Exception):
    """Base class for every error raised by digify."""


class UnsupportedLocale(DigifyError, ValueError):  # noqa: N818
    """Exception raised when a resolver does not support the requested locale."""

    def __init__(self, resolver: str, locale: str):
        self.resolver = resolver
        self.locale = locale
        super().__init__(f'Locale "{locale}" is not supported by "{resolver}"')


class UnregisteredResolver(DigifyError, KeyError):  # noqa: N818
    """Exception raised when a resolver name was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'"{name}" must be registered before it is used')

    def __str__(self):
        return self.args[0]


class InvalidDurationUnit(DigifyError, ValueError):  # noqa: N818
    """Exception raised when matched text is not a known duration unit."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Invalid duration name "{name}"')
