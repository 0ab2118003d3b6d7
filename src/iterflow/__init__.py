import logging

from . import fn
from ._config import Config, get_config, set_config
from ._errors import ElementTypeError, IterFlowError, ValidationError
from ._iter import Iter, Seq
from ._option import NONE, Option, OptionUnwrapError, Some
from ._sources import chain, interleave, merge, range, repeat, zip, zip_with  # noqa: A004
from ._types import Comparator, Enumerated, Partitioned, Quartiles

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Comparator",
    "Config",
    "ElementTypeError",
    "Enumerated",
    "Iter",
    "IterFlowError",
    "Option",
    "OptionUnwrapError",
    "Partitioned",
    "Quartiles",
    "Seq",
    "Some",
    "ValidationError",
    "chain",
    "fn",
    "get_config",
    "interleave",
    "merge",
    "range",
    "repeat",
    "set_config",
    "zip",
    "zip_with",
]
