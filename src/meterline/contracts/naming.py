"""Identifiers of pipeline elements.

Every source, transform and output is identified by the plugin that
registered it plus a name local to that plugin. Ordering is lexicographic
on (plugin, name).
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class SourceName:
    """Identifier of a measurement source."""

    plugin: str
    source: str

    def __str__(self) -> str:
        return f"source/{self.plugin}/{self.source}"


@dataclass(frozen=True, order=True)
class TransformName:
    """Identifier of a transform."""

    plugin: str
    transform: str

    def __str__(self) -> str:
        return f"transform/{self.plugin}/{self.transform}"


@dataclass(frozen=True, order=True)
class OutputName:
    """Identifier of an output."""

    plugin: str
    output: str

    def __str__(self) -> str:
        return f"output/{self.plugin}/{self.output}"

