from __future__ import annotations

import logging

from perlver.errors import AlphaWithoutDecimalError, InvalidVersionError, VersionContractError
from perlver.matcher import match_lax, match_strict
from perlver.reconstruct import reconstruct
from perlver.version import Version

logger = logging.getLogger("perlver.api")


def parse(text: str) -> Version:
    """Parse a lax or strict Perl version string.

    Both grammars are matched independently. Lax wins when only it matches,
    or when its match is strictly longer than the strict one; in the latter
    case an alpha-without-decimal failure falls back to the strict match.
    """
    if not isinstance(text, str):
        raise TypeError(f"version must be a str, not {type(text).__name__}")

    lax = match_lax(text)
    strict = match_strict(text)

    # lax goes first: it is the only grammar whose reconstruction can fail
    if lax is not None:
        if strict is None:
            return reconstruct(lax, text)
        if lax.span > strict.span:
            try:
                return reconstruct(lax, text)
            except AlphaWithoutDecimalError:
                logger.debug(
                    "alpha without decimal in %r; falling back to strict %s match",
                    text,
                    strict.form.name,
                )

    if strict is not None:
        return reconstruct(strict, text)

    raise InvalidVersionError(text)


def parse_required(text: str) -> Version:
    """Parse a version the caller has already validated.

    Any parse failure is a broken promise by the caller and surfaces as
    ``VersionContractError``. Do not use on untrusted input.
    """
    try:
        return parse(text)
    except InvalidVersionError as exc:
        raise VersionContractError(str(exc)) from exc


def is_valid(text: str) -> bool:
    try:
        parse(text)
    except InvalidVersionError:
        return False
    return True


def undefined() -> Version:
    return Version.undef()


def is_compatible(candidate: str, target: str) -> bool:
    """True when ``candidate >= target``; both must be valid versions."""
    return parse_required(candidate).greater_equal(parse_required(target))
