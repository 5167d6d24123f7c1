from __future__ import annotations

from collections.abc import Callable

from perlver.errors import AlphaWithoutDecimalError, GrammarMismatchError, InvalidVersionError
from perlver.matcher import Match
from perlver.patterns import LAX, STRICT
from perlver.version import Version

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _component(digits: str, *, original: str) -> int:
    # Digit runs are unbounded in the grammar; components are not.
    if len(digits.lstrip("0")) > 19:
        raise InvalidVersionError(original, message=f"version component out of range: {digits}")
    value = int(digits)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidVersionError(original, message=f"version component out of range: {digits}")
    return value


def fraction_values(digits: str, *, original: str = "") -> tuple[int, ...]:
    """Group fractional digits in threes, right-padding the last group with zeros.

    >>> fraction_values("0023")
    (2, 300)
    """
    digits = digits.removeprefix(".")
    if not digits:
        return ()
    chunks = [digits[i : i + 3] for i in range(0, len(digits), 3)]
    chunks[-1] = chunks[-1].ljust(3, "0")
    return tuple(_component(c, original=original) for c in chunks)


def dotted_values(group: str, *, original: str = "") -> tuple[int, ...]:
    group = group.removeprefix(".")
    return tuple(_component(part, original=original) for part in group.split("."))


def _alpha_digits(alpha: str) -> str:
    return alpha.removeprefix("_")


def from_undef(m: Match, original: str) -> Version:
    return Version(original=original, alpha=False, qv=False, components=(0,))


def from_lax_dotted_v(m: Match, original: str) -> Version:
    integer = m.group("integer")
    if not integer:
        raise GrammarMismatchError(f"lax dotted_v match without integer: {original!r}")
    dotted = m.group("dotted")
    alpha = m.group("alpha")
    if alpha:
        dotted += _alpha_digits(alpha)
    minors = dotted_values(dotted, original=original) if dotted else ()
    values = (_component(integer, original=original),) + minors
    # v-prefixed versions imply a zero minor and patch.
    if len(values) < 3:
        values += (0,) * (3 - len(values))
    return Version(original=original, alpha=bool(alpha), qv=True, components=values)


def from_lax_dotted_bare(m: Match, original: str) -> Version:
    group = m.group("dotted")
    if not group:
        raise GrammarMismatchError(f"lax dotted_bare match without dotted group: {original!r}")
    integer = m.group("integer")
    alpha = m.group("alpha")
    dotted = group + _alpha_digits(alpha) if alpha else group
    minors = dotted_values(dotted, original=original)

    leading: tuple[int, ...] = ()
    if integer:
        leading = (_component(integer, original=original),)
    elif group.startswith("."):
        leading = (0,)
    values = leading + minors
    # Only a three-part result counts as a quoted vector here, implied zero
    # included; "1.2.3" is qv, "1.2.3.4" is not.
    return Version(original=original, alpha=bool(alpha), qv=len(values) == 3, components=values)


def from_lax_decimal_int(m: Match, original: str) -> Version:
    integer = m.group("integer")
    if not integer:
        raise GrammarMismatchError(f"lax decimal_int match without integer: {original!r}")
    fraction = m.group("fraction")
    alpha = m.group("alpha")
    digits = fraction
    if alpha:
        if not fraction:
            raise AlphaWithoutDecimalError(original)
        digits += _alpha_digits(alpha)
    values = (_component(integer, original=original),) + fraction_values(digits, original=original)
    if original.endswith(".") and not fraction:
        values += (0,)
    return Version(original=original, alpha=bool(alpha), qv=False, components=values)


def from_lax_decimal_frac(m: Match, original: str) -> Version:
    fraction = m.group("fraction")
    alpha = m.group("alpha")
    digits = fraction + _alpha_digits(alpha) if alpha else fraction
    fractions = fraction_values(digits, original=original)
    if not fractions:
        raise GrammarMismatchError(f"lax decimal_frac match without fraction: {original!r}")
    return Version(original=original, alpha=bool(alpha), qv=False, components=(0,) + fractions)


def from_strict_decimal(m: Match, original: str) -> Version:
    integer = m.group("integer")
    if not integer:
        raise GrammarMismatchError(f"strict decimal match without integer: {original!r}")
    values = (_component(integer, original=original),) + fraction_values(
        m.group("fraction"), original=original
    )
    return Version(original=original, alpha=False, qv=False, components=values)


def from_strict_dotted(m: Match, original: str) -> Version:
    integer = m.group("integer")
    dotted = m.group("dotted")
    if not integer or not dotted:
        raise GrammarMismatchError(f"strict dotted_v match without fragments: {original!r}")
    values = (_component(integer, original=original),) + dotted_values(dotted, original=original)
    return Version(original=original, alpha=False, qv=True, components=values)


_BUILDERS: dict[tuple[str, str], Callable[[Match, str], Version]] = {
    (LAX, "undef"): from_undef,
    (LAX, "dotted_v"): from_lax_dotted_v,
    (LAX, "dotted_bare"): from_lax_dotted_bare,
    (LAX, "decimal_int"): from_lax_decimal_int,
    (LAX, "decimal_frac"): from_lax_decimal_frac,
    (STRICT, "decimal"): from_strict_decimal,
    (STRICT, "dotted_v"): from_strict_dotted,
}


def reconstruct(m: Match, original: str) -> Version:
    builder = _BUILDERS.get((m.form.grammar, m.form.name))
    if builder is None:
        raise GrammarMismatchError(f"no reconstruction for {m.form.grammar} sub-form {m.form.name!r}")
    return builder(m, original)
