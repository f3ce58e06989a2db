"""Metric registry.

Plugins register the metrics they produce while they start. Names are
unique: a second registration under the same name is a plugin bug and
is rejected.
"""

from collections.abc import Iterator

from meterline.contracts import MetricDefinition, MetricId


class MetricRegistry:
    """In-memory registry of metric definitions.

    Usage:
        registry = MetricRegistry()
        metric_id = registry.register(MetricDefinition("cpu_energy", MeasurementType.F64, PrefixedUnit(Unit.JOULE)))
        registry.by_name("cpu_energy")  # (metric_id, definition)
    """

    def __init__(self) -> None:
        self._definitions: list[MetricDefinition] = []
        self._ids_by_name: dict[str, MetricId] = {}

    def register(self, definition: MetricDefinition) -> MetricId:
        """Register a metric and return its id.

        Raises:
            ValueError: If a metric with the same name is already registered
        """
        if definition.name in self._ids_by_name:
            existing = self._definitions[self._ids_by_name[definition.name]]
            raise ValueError(f"Duplicate metric name: '{definition.name}'. Already registered as {existing}")
        metric_id = MetricId(len(self._definitions))
        self._definitions.append(definition)
        self._ids_by_name[definition.name] = metric_id
        return metric_id

    def by_name(self, name: str) -> tuple[MetricId, MetricDefinition] | None:
        metric_id = self._ids_by_name.get(name)
        if metric_id is None:
            return None
        return metric_id, self._definitions[metric_id]

    def by_id(self, metric_id: MetricId) -> MetricDefinition | None:
        if 0 <= metric_id < len(self._definitions):
            return self._definitions[metric_id]
        return None

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[tuple[MetricId, MetricDefinition]]:
        for index, definition in enumerate(self._definitions):
            yield MetricId(index), definition

    def __contains__(self, name: object) -> bool:
        return name in self._ids_by_name
