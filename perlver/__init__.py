from __future__ import annotations

from perlver.api import is_compatible, is_valid, parse, parse_required, undefined
from perlver.errors import (
    AlphaWithoutDecimalError,
    GrammarMismatchError,
    InvalidVersionError,
    VersionContractError,
)
from perlver.patterns import LAX_VERSION_REGEX, STRICT_VERSION_REGEX
from perlver.schemas import (
    VersionRecord,
    decode_version,
    dumps_version,
    encode_version,
    loads_version,
)
from perlver.version import Version

__all__ = [
    "__version__",
    # Parsing
    "parse",
    "parse_required",
    "is_valid",
    "undefined",
    "is_compatible",
    # Value
    "Version",
    # Grammars
    "LAX_VERSION_REGEX",
    "STRICT_VERSION_REGEX",
    # Record codec
    "VersionRecord",
    "encode_version",
    "decode_version",
    "dumps_version",
    "loads_version",
    # Errors
    "InvalidVersionError",
    "AlphaWithoutDecimalError",
    "GrammarMismatchError",
    "VersionContractError",
]

__version__ = "0.1.0"
