"""Ordered validation pipelines for store documents.

A pipeline is a sequence of stages. Each stage names the input fields that
trigger it and returns either ``Valid`` with the normalized values it
produced or ``Invalid`` with the error to raise. Stages run left to right and
the first ``Invalid`` stops the run.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from bookings.domain.errors import DomainError


@dataclass(frozen=True)
class Valid:
    changes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Invalid:
    error: DomainError


StageResult = Valid | Invalid


@dataclass(frozen=True)
class Stage:
    """One validation step keyed by the fields it reads."""

    fields: tuple[str, ...]
    check: Callable[[Mapping[str, Any]], StageResult]


class ValidationPipeline:
    """Runs stages in order with fail-fast semantics."""

    def __init__(self, *stages: Stage) -> None:
        self._stages = stages

    @property
    def fields(self) -> frozenset[str]:
        """Every field some stage reads."""
        return frozenset(name for stage in self._stages for name in stage.fields)

    def run(
        self,
        document: Mapping[str, Any],
        only: Iterable[str] | None = None,
    ) -> dict[str, Any]:
        """Validate and normalize a document.

        With ``only``, stages that read none of those fields are skipped.
        Returns a copy of the document with every stage's changes applied.

        Raises:
            DomainError: The error from the first failing stage.
        """
        selected = None if only is None else frozenset(only)
        result = dict(document)
        for stage in self._stages:
            if selected is not None and selected.isdisjoint(stage.fields):
                continue
            outcome = stage.check(result)
            if isinstance(outcome, Invalid):
                raise outcome.error
            result.update(outcome.changes)
        return result


def diff_fields(current: Mapping[str, Any], patch: Mapping[str, Any]) -> set[str]:
    """Return the patch keys whose values differ from the stored record."""
    return {name for name, value in patch.items() if current.get(name) != value}
