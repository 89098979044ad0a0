from __future__ import annotations

from .outbound import IntoArma, to_value, to_arma_string
from .inbound import FromArma, from_arma, register_parser, PARSERS

__all__ = [
    "IntoArma",
    "to_value",
    "to_arma_string",
    "FromArma",
    "from_arma",
    "register_parser",
    "PARSERS",
]
