from __future__ import annotations

from dataclasses import dataclass

UNDEF_TEXT = "undef"


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A parsed Perl ``version.pm`` value.

    ``components`` holds one integer per significance position (index 0 is
    the major part). Decimal versions derive everything after index 0 from
    3-digit groups of the fraction, so ``1.2`` is ``(1, 200)`` while
    ``v1.2`` is ``(1, 2, 0)``.

    Equality is prefix-limited: only the positions both values have are
    compared, so ``v5.34`` equals both ``v5.34.0`` and ``v5.34.1`` even though
    those two differ. The relation is not transitive.
    """

    original: str
    alpha: bool
    qv: bool
    components: tuple[int, ...]

    def __post_init__(self) -> None:
        components = tuple(self.components)
        if not components:
            raise ValueError("version must have at least one component")
        object.__setattr__(self, "components", components)

    @classmethod
    def undef(cls) -> "Version":
        return cls(original=UNDEF_TEXT, alpha=False, qv=False, components=(0,))

    def is_alpha(self) -> bool:
        return self.alpha

    def is_qv(self) -> bool:
        return self.qv

    # Formatting

    def normal(self) -> str:
        """Dotted form with at least three components, e.g. ``1.2`` -> ``v1.200.0``."""
        values = list(self.components)
        values.extend([0] * (3 - len(values)))
        return "v" + ".".join(str(v) for v in values)

    def numify(self) -> float:
        """Single float encoding, e.g. ``v1.2.3`` -> ``1.002003``.

        Long component lists lose precision; that is inherent to the encoding.
        """
        if len(self.components) == 1:
            return float(self.components[0])
        tail = "".join(str(v).rjust(3, "0") for v in self.components[1:])
        return float(f"{self.components[0]}.{tail}")

    def stringify(self) -> str:
        if self.original == UNDEF_TEXT:
            return "0"
        return self.original

    def raw(self) -> str:
        return self.original

    def __str__(self) -> str:
        return self.stringify()

    # Comparison. Everything is derived from less_than/greater_than.

    def less_than(self, other: "Version") -> bool:
        for a, b in zip(self.components, other.components):
            if a != b:
                return a < b
        return False

    def greater_than(self, other: "Version") -> bool:
        for a, b in zip(self.components, other.components):
            if a != b:
                return a > b
        return False

    def equal(self, other: "Version") -> bool:
        return not (self.less_than(other) or self.greater_than(other))

    def not_equal(self, other: "Version") -> bool:
        return not self.equal(other)

    def less_equal(self, other: "Version") -> bool:
        return self.equal(other) or self.less_than(other)

    def greater_equal(self, other: "Version") -> bool:
        return self.equal(other) or self.greater_than(other)

    def compare(self, other: "Version") -> int:
        if self.less_than(other):
            return -1
        if self.greater_than(other):
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.less_than(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.greater_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.less_equal(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.greater_equal(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.not_equal(other)

    def __hash__(self) -> int:
        # Values that compare equal always share their first component.
        return hash(self.components[0])
