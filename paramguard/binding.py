"""
Request binding adapter.

``bind`` is the controller-side helper: it resolves a named validator, runs it
at most once per request, and classifies the outcome as ``Proceed`` (hand the
cleaned mapping to the handler) or ``Reject`` (answer with a 400 and the error
body). It never performs I/O; halting the request is the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from .engine import Invalid, ValidationResult, validate
from .logging_config import TRACE
from .registry import resolve

logger = logging.getLogger(__name__)

DEFAULT_REJECT_STATUS = 400


class RequestCache(MutableMapping[str, ValidationResult]):
    """Request-scoped memo of validation results keyed by validator name.

    Create one per request and drop it when the request ends. ``runs`` counts
    how many results were stored, i.e. how many times the engine ran. The
    classified outcome of each result is kept too, so repeated binds return
    the same ``Proceed``/``Reject`` object.
    """

    def __init__(self) -> None:
        self._results: dict[str, ValidationResult] = {}
        self._outcomes: dict[tuple[str, int], BindOutcome] = {}
        self.runs = 0

    def __getitem__(self, name: str) -> ValidationResult:
        return self._results[name]

    def __setitem__(self, name: str, result: ValidationResult) -> None:
        self._results[name] = result
        self._drop_outcomes(name)
        self.runs += 1

    def __delitem__(self, name: str) -> None:
        del self._results[name]
        self._drop_outcomes(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def outcome(self, name: str, status_code: int = DEFAULT_REJECT_STATUS) -> BindOutcome:
        """Classify the cached result for ``name``, once per status code."""
        key = (name, status_code)
        if key not in self._outcomes:
            self._outcomes[key] = classify(self._results[name], status_code)
        return self._outcomes[key]

    def _drop_outcomes(self, name: str) -> None:
        for key in [k for k in self._outcomes if k[0] == name]:
            del self._outcomes[key]

    def __repr__(self) -> str:
        return f"RequestCache({sorted(self._results)!r}, runs={self.runs})"


@dataclass(frozen=True)
class Proceed:
    """Validation passed; the handler continues with ``cleaned``."""

    cleaned: Mapping[str, Any]
    result: ValidationResult | None = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class Reject:
    """Validation failed; the caller should respond with ``body`` and ``status_code``."""

    body: dict[str, Any]
    status_code: int = DEFAULT_REJECT_STATUS
    result: ValidationResult | None = field(default=None, repr=False, compare=False)


BindOutcome = Proceed | Reject


def classify(result: ValidationResult, status_code: int = DEFAULT_REJECT_STATUS) -> BindOutcome:
    """Turn a validation result into a bind outcome.

    The outcome keeps a reference to ``result`` so callers can tell whether two
    outcomes came from the same (memoized) validation run.
    """
    if isinstance(result, Invalid):
        return Reject(body=result.to_dict(), status_code=status_code, result=result)
    return Proceed(cleaned=result.cleaned, result=result)


def bind(
    name: str,
    raw_input: Mapping[str, Any],
    registry: Mapping[str, Any],
    cache: MutableMapping[str, ValidationResult],
    status_code: int = DEFAULT_REJECT_STATUS,
) -> BindOutcome:
    """
    Validate request input with a named validator, memoized per request.

    Args:
        name: Registered validator name
        raw_input: Untrusted request parameters
        registry: Mapping of validator name to definition
        cache: Request-scoped result cache (usually a ``RequestCache``)
        status_code: Status carried by ``Reject`` outcomes

    Returns:
        ``Proceed`` with the cleaned mapping, or ``Reject`` with the error body.
        With a ``RequestCache`` every call for ``name`` returns the same
        outcome object; a plain mapping cache gets a fresh outcome wrapping
        the same cached result.

    Raises:
        UnknownValidatorError: If ``name`` is not registered (nothing is cached)
    """
    result = cache.get(name)
    if result is None:
        definition = resolve(registry, name)
        result = validate(definition, raw_input)
        # Cache before classifying so failures are memoized too
        cache[name] = result
        logger.debug(f"Validator '{name}' ran: {'valid' if result.is_valid else 'invalid'}")
    else:
        logger.log(TRACE, f"Validator '{name}' served from request cache")

    if isinstance(cache, RequestCache):
        outcome = cache.outcome(name, status_code)
    else:
        outcome = classify(result, status_code)
    if isinstance(outcome, Reject):
        fields = [e["field"] for e in outcome.body["errors"]]
        logger.info(f"Rejected parameters for '{name}': {fields}")
    return outcome
