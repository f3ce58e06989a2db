"""Read-only views of the agent state, handed to bootstrap hooks."""

from dataclasses import dataclass

from meterline.contracts import MetricLookup, OutputName, SourceName, TransformName
from meterline.plugins.protocols import PluginProtocol


@dataclass(frozen=True)
class StartupInspection:
    """State after every plugin has started."""

    metrics: MetricLookup
    plugins: tuple[PluginProtocol, ...]


class PipelineInspection:
    """Snapshot of the registered pipeline elements.

    Each accessor returns a fresh list; callers may sort or filter it freely.
    """

    def __init__(
        self,
        sources: list[SourceName],
        transforms: list[TransformName],
        outputs: list[OutputName],
    ) -> None:
        self._sources = tuple(sources)
        self._transforms = tuple(transforms)
        self._outputs = tuple(outputs)

    def sources(self) -> list[SourceName]:
        return list(self._sources)

    def transforms(self) -> list[TransformName]:
        return list(self._transforms)

    def outputs(self) -> list[OutputName]:
        return list(self._outputs)
