from __future__ import annotations

import re
from dataclasses import dataclass

# Regex fragments are kept separate so both grammars read like the
# version::regexp documentation they come from.

FRACTION = r"(\.[0-9]+)"

# strict
STRICT_INT = r"(0|[1-9][0-9]*)"
STRICT_DOTTED_PART = r"(?:\.[0-9]{1,3})"
STRICT_DOTTED_2P = r"(" + STRICT_DOTTED_PART + r"{2,})"
STRICT_DECIMAL_FORM = r"(" + STRICT_INT + FRACTION + r"?)"
STRICT_DOTTED_FORM = r"(v" + STRICT_INT + STRICT_DOTTED_2P + r")"

# lax
LAX_INT = r"([0-9]+)"
LAX_DOTTED_PART = r"(?:\.[0-9]+)"
LAX_DOTTED_2P = r"(" + LAX_DOTTED_PART + r"{2,})"
LAX_DOTTED_P = r"(" + LAX_DOTTED_PART + r"+)"
LAX_ALPHA = r"(_[0-9]+)"
LAX_UNDEF = r"(undef)"
LAX_DECIMAL_FORM = (
    r"(" + LAX_INT + r"(?:" + FRACTION + r"|\.)?" + LAX_ALPHA + r"?|" + FRACTION + LAX_ALPHA + r"?)"
)
LAX_DOTTED_FORM = (
    r"(v" + LAX_INT + r"(?:" + LAX_DOTTED_P + LAX_ALPHA + r"?)?|"
    + LAX_INT + r"?" + LAX_DOTTED_2P + LAX_ALPHA + r"?)"
)

# Combined, end-anchored forms. They describe the accepted syntax; matching is
# done per sub-form below so alternation order never decides the result.
LAX_VERSION_REGEX = r"(?:" + LAX_UNDEF + r"|" + LAX_DOTTED_FORM + r"|" + LAX_DECIMAL_FORM + r")\Z"
STRICT_VERSION_REGEX = r"(?:" + STRICT_DECIMAL_FORM + r"|" + STRICT_DOTTED_FORM + r")\Z"

LAX = "lax"
STRICT = "strict"


@dataclass(frozen=True, slots=True)
class SubForm:
    grammar: str
    name: str
    pattern: re.Pattern[str]


def _form(grammar: str, name: str, regex: str) -> SubForm:
    return SubForm(grammar=grammar, name=name, pattern=re.compile(regex + r"\Z"))


_ALPHA = r"(?P<alpha>_[0-9]+)"

# Declaration order is the tie-break order when two sub-forms consume the
# same number of characters.
LAX_FORMS: tuple[SubForm, ...] = (
    _form(LAX, "undef", r"(?P<undef>undef)"),
    _form(
        LAX,
        "dotted_v",
        r"v(?P<integer>[0-9]+)(?:(?P<dotted>(?:\.[0-9]+)+)" + _ALPHA + r"?)?",
    ),
    _form(
        LAX,
        "dotted_bare",
        r"(?P<integer>[0-9]+)?(?P<dotted>(?:\.[0-9]+){2,})" + _ALPHA + r"?",
    ),
    _form(
        LAX,
        "decimal_int",
        r"(?P<integer>[0-9]+)(?:(?P<fraction>\.[0-9]+)|\.)?" + _ALPHA + r"?",
    ),
    _form(LAX, "decimal_frac", r"(?P<fraction>\.[0-9]+)" + _ALPHA + r"?"),
)

STRICT_FORMS: tuple[SubForm, ...] = (
    _form(STRICT, "decimal", r"(?P<integer>0|[1-9][0-9]*)(?P<fraction>\.[0-9]+)?"),
    _form(STRICT, "dotted_v", r"v(?P<integer>0|[1-9][0-9]*)(?P<dotted>(?:\.[0-9]{1,3}){2,})"),
)
