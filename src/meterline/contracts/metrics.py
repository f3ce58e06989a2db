"""Metric definitions and the read-only lookup contract of the registry."""

from dataclasses import dataclass
from typing import NewType, Protocol

from meterline.contracts.measurement import MeasurementType
from meterline.contracts.units import PrefixedUnit

MetricId = NewType("MetricId", int)


@dataclass(frozen=True)
class MetricDefinition:
    """Definition of a registered metric.

    Frozen: a metric cannot change unit or type once registered.
    """

    name: str
    value_type: MeasurementType
    unit: PrefixedUnit
    description: str = ""


class MetricLookup(Protocol):
    """Read-only view of a metric registry."""

    def by_name(self, name: str) -> tuple[MetricId, MetricDefinition] | None:
        """Look up a metric by name, returning None if it is not registered."""
        ...

    def by_id(self, metric_id: MetricId) -> MetricDefinition | None:
        """Look up a metric by its id, returning None if it is unknown."""
        ...
