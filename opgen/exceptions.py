"""Exception hierarchy for opgen.

Every fatal condition raised by the generator derives from
:class:`GeneratorError`, so ``python -m opgen`` can report it and exit
without a traceback::

    GeneratorError
    +-- SpecLoadError
    +-- RefResolutionError
    +-- TemplateNotFoundError
    +-- ConfigError
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generation failures."""


class SpecLoadError(GeneratorError):
    """The OpenAPI document could not be read or parsed."""


class RefResolutionError(GeneratorError):
    """A ``$ref`` pointer does not designate anything in the document."""

    def __init__(self, ref: str, reason: str) -> None:
        self.ref = ref
        super().__init__(f"Cannot resolve $ref '{ref}': {reason}")


class TemplateNotFoundError(GeneratorError):
    """A template name was requested that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


class ConfigError(GeneratorError):
    """The configuration file is missing or invalid."""
