from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from perlver.patterns import LAX_FORMS, STRICT_FORMS, SubForm

logger = logging.getLogger("perlver.matcher")


@dataclass(frozen=True, slots=True)
class Match:
    form: SubForm
    start: int
    span: int
    groups: dict[str, str] = field(default_factory=dict)

    def group(self, name: str) -> str:
        return self.groups.get(name, "")


def _earliest_match(form: SubForm, text: str) -> Match | None:
    # Every sub-form is anchored at the end of the text, so the earliest start
    # offset is also the longest match.
    for start in range(len(text) + 1):
        m = form.pattern.match(text, start)
        if m is None:
            continue
        groups = {k: v or "" for k, v in m.groupdict().items()}
        return Match(form=form, start=start, span=len(text) - start, groups=groups)
    return None


def match_grammar(text: str, forms: Iterable[SubForm]) -> Match | None:
    """Leftmost-longest match of ``text`` against the union of ``forms``.

    The sub-form consuming the most characters wins; ties go to the sub-form
    declared first.
    """
    best: Match | None = None
    for form in forms:
        m = _earliest_match(form, text)
        if m is None:
            continue
        if best is None or m.span > best.span:
            best = m
    if best is not None:
        logger.debug(
            "%s grammar matched %r as %s (span=%d)",
            best.form.grammar,
            text,
            best.form.name,
            best.span,
        )
    return best


def match_lax(text: str) -> Match | None:
    return match_grammar(text, LAX_FORMS)


def match_strict(text: str) -> Match | None:
    return match_grammar(text, STRICT_FORMS)
