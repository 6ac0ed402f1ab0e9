"""
A small fluent assertion host and the tolerance predicate bound into it.

    expect(515).to.be.within_tolerance_of(500, 0.05)
    expect(-645).to.be.within_tol_of(-1000, [0.3, -0.7])
    expect("foo").to.have.length.within_tolerance_of(2, 0.5)
    expect(600).to.not_.be.within_tolerance_of(500, 0.05)

Every chain step returns a new frozen Expectation; negation, mode and the
default message travel as fields rather than as flags on shared state.
Predicates are attached by name with Expectation.add_method() and looked up
when an attribute is not found on the instance.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace
from typing import Any, Callable, ClassVar, Optional

from .predicate import Mode, assert_within_tolerance_of

Predicate = Callable[..., "Expectation"]


@dataclass(frozen=True)
class Expectation:
    """
    The subject under test plus the chain state accumulated so far.

    Chain words (``to``, ``be``, ``have``) return the expectation unchanged
    and exist only for readability.
    """

    subject: Any
    message: Optional[str] = None
    negated: bool = False
    mode: Mode = Mode.VALUE

    _methods: ClassVar[dict[str, Predicate]] = {}

    @classmethod
    def add_method(cls, name: str, fn: Predicate) -> None:
        """
        Register ``fn`` as a chainable method called ``name``.

        ``fn`` receives the Expectation as its first argument. Registering a
        different callable under a taken name raises ValueError.
        """
        if not name.isidentifier() or name.startswith("_"):
            raise ValueError(f"predicate name must be a public identifier, got {name!r}")
        existing = cls._methods.get(name)
        if existing is not None and existing is not fn:
            raise ValueError(f"predicate {name!r} is already registered")
        cls._methods[name] = fn

    @classmethod
    def registered_methods(cls) -> tuple[str, ...]:
        return tuple(sorted(cls._methods))

    def __getattr__(self, name: str) -> Callable[..., Expectation]:
        try:
            fn = type(self)._methods[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute or predicate {name!r}"
            ) from None
        return functools.partial(fn, self)

    # ── Chain words ────────────────────────────────────────────────────────────

    @property
    def to(self) -> Expectation:
        return self

    @property
    def be(self) -> Expectation:
        return self

    @property
    def have(self) -> Expectation:
        return self

    @property
    def not_(self) -> Expectation:
        return replace(self, negated=not self.negated)

    @property
    def length(self) -> Expectation:
        return replace(self, mode=Mode.LENGTH)


def expect(subject: Any, message: Optional[str] = None) -> Expectation:
    """Start an assertion chain on ``subject``."""
    return Expectation(subject=subject, message=message)


# ── Tolerance predicate ────────────────────────────────────────────────────────


def within_tolerance_of(
    expectation: Expectation,
    expected: Any,
    tol: Any,
    message: Optional[str] = None,
) -> Expectation:
    """
    Assert the subject (or its length) is within ``tol`` of ``expected``.

        # 515 within 500 +/- 5% (475 .. 525)
        expect(515).to.be.within_tolerance_of(500, 0.05)

        # 786 within 1000 +30% / -70% (300 .. 1300)
        expect(786).to.be.within_tolerance_of(1000, [0.3, -0.7])

        # 400 within 350 +15% (350 .. 402.5)
        expect(400).to.be.within_tolerance_of(350, [0.15])

    An explicit ``message`` replaces the one given to expect().
    """
    assert_within_tolerance_of(
        expectation.subject,
        expected,
        tol,
        message or expectation.message,
        mode=expectation.mode,
        negate=expectation.negated,
    )
    return expectation


def register() -> None:
    """Attach the tolerance predicate under its full and short names."""
    Expectation.add_method("within_tolerance_of", within_tolerance_of)
    Expectation.add_method("within_tol_of", within_tolerance_of)


register()
