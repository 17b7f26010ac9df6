"""Exception types raised by htmlbuilder."""


class HtmlBuilderError(Exception):
    """Base class for all htmlbuilder errors."""


class InvalidArgumentError(HtmlBuilderError, ValueError):
    """Raised when an operation receives an unsupported argument or combination."""


class StructureError(HtmlBuilderError, ValueError):
    """Raised when a mutation would break single ownership or create a cycle."""


__all__ = ["HtmlBuilderError", "InvalidArgumentError", "StructureError"]
