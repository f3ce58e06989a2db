# tests/helpers/plugins.py
"""Configurable plugins for agent bootstrap tests.

Tests describe what a plugin registers through its config dict instead of
writing a new class per scenario:

    plugin("coffee", metrics=[("coffee_counter", "u64", "1")], sources=["counter"])
"""

from typing import Any

from meterline.agent import PluginMetadata
from meterline.plugins.context import PluginStartContext


class RecordingPlugin:
    """Plugin registering whatever its config lists, and recording its lifecycle.

    Config keys:
        metrics: list of (name, value_type, unit) tuples
        sources / transforms / outputs: lists of local element names
        fail_on_start: raise RuntimeError from start()
        fail_on_stop: raise RuntimeError from stop()
    """

    name = "recording"
    version = "0.1.0"

    def __init__(self, config: dict[str, Any]) -> None:
        self.config = config
        self.started = False
        self.stopped = False

    def start(self, ctx: PluginStartContext) -> None:
        if self.config.get("fail_on_start"):
            raise RuntimeError(f"plugin {self.name} failed to start")
        for metric_name, value_type, unit in self.config.get("metrics", []):
            ctx.create_metric(metric_name, value_type, unit)
        for source in self.config.get("sources", []):
            ctx.add_source(source, object())
        for transform in self.config.get("transforms", []):
            ctx.add_transform(transform, object())
        for output in self.config.get("outputs", []):
            ctx.add_output(output, object())
        self.started = True

    def stop(self) -> None:
        if self.config.get("fail_on_stop"):
            raise RuntimeError(f"plugin {self.name} failed to stop")
        self.stopped = True


def plugin_class(name: str) -> type[RecordingPlugin]:
    """Create a RecordingPlugin subclass with the given plugin name."""
    return type(f"{name.title().replace('_', '')}Plugin", (RecordingPlugin,), {"name": name})


def plugin(name: str, **config: Any) -> PluginMetadata:
    """Shorthand for PluginMetadata(plugin_class(name), config)."""
    return PluginMetadata(plugin_class(name), config)
