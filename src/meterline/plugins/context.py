"""Context handed to a plugin while it starts."""

from typing import Any

from meterline.contracts import (
    MeasurementType,
    MetricDefinition,
    MetricId,
    MetricLookup,
    OutputName,
    PrefixedUnit,
    SourceName,
    TransformName,
)
from meterline.core.metrics import MetricRegistry


class PipelineElements:
    """Pipeline elements registered by plugins, keyed by identifier.

    The elements themselves are opaque here; only their identifiers are
    inspected during bootstrap.
    """

    def __init__(self) -> None:
        self.sources: dict[SourceName, Any] = {}
        self.transforms: dict[TransformName, Any] = {}
        self.outputs: dict[OutputName, Any] = {}

    def add_source(self, name: SourceName, source: Any) -> None:
        if name in self.sources:
            raise ValueError(f"Duplicate source: '{name}'")
        self.sources[name] = source

    def add_transform(self, name: TransformName, transform: Any) -> None:
        if name in self.transforms:
            raise ValueError(f"Duplicate transform: '{name}'")
        self.transforms[name] = transform

    def add_output(self, name: OutputName, output: Any) -> None:
        if name in self.outputs:
            raise ValueError(f"Duplicate output: '{name}'")
        self.outputs[name] = output


class PluginStartContext:
    """Registration surface for a single starting plugin.

    Element names are local to the plugin: add_source("rapl") called by
    plugin "energy" registers SourceName("energy", "rapl").
    """

    def __init__(self, plugin_name: str, metrics: MetricRegistry, elements: PipelineElements) -> None:
        self._plugin_name = plugin_name
        self._metrics = metrics
        self._elements = elements

    @property
    def plugin_name(self) -> str:
        return self._plugin_name

    @property
    def metrics(self) -> MetricLookup:
        """Metrics registered so far, by any plugin."""
        return self._metrics

    def create_metric(
        self,
        name: str,
        value_type: MeasurementType | type | str,
        unit: Any,
        description: str = "",
    ) -> MetricId:
        """Register a new metric.

        Args:
            name: Unique metric name
            value_type: MeasurementType, or a Python type such as int or float
            unit: PrefixedUnit, Unit or UCUM unit code

        Raises:
            ValueError: If the name is taken, or the type or unit is invalid
        """
        definition = MetricDefinition(
            name=name,
            value_type=MeasurementType.coerce(value_type),
            unit=PrefixedUnit.coerce(unit),
            description=description,
        )
        return self._metrics.register(definition)

    def add_source(self, name: str, source: Any) -> SourceName:
        source_name = SourceName(self._plugin_name, name)
        self._elements.add_source(source_name, source)
        return source_name

    def add_transform(self, name: str, transform: Any) -> TransformName:
        transform_name = TransformName(self._plugin_name, name)
        self._elements.add_transform(transform_name, transform)
        return transform_name

    def add_output(self, name: str, output: Any) -> OutputName:
        output_name = OutputName(self._plugin_name, name)
        self._elements.add_output(output_name, output)
        return output_name
