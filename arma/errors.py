from __future__ import annotations


class ArmaError(Exception):
    """ Base class for all arma errors"""
    pass

class ArmaTypeError(ArmaError, TypeError):
    """ Raised when a Python type has no Arma conversion"""
    pass

class ArmaRangeError(ArmaError, ValueError):
    """ Raised when an integer cannot be represented exactly as an Arma number"""

class ArmaParseError(ArmaError, ValueError):
    """ Raised when text from the runtime does not parse as the requested type"""

    def __init__(self, message: str, target: type | None = None, text: str | None = None):
        super().__init__(message)
        self.target = target
        self.text = text
