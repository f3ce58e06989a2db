# src/meterline/plugins/protocols.py
"""Plugin protocol.

Defines what a plugin class must provide to be loaded by the agent.
Used for type checking, not runtime enforcement.

Lifecycle:
1. __init__(config) - Plugin instantiation
2. start(ctx) - Register metrics and pipeline elements
3. stop() - Release resources on shutdown
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from meterline.plugins.context import PluginStartContext


@runtime_checkable
class PluginProtocol(Protocol):
    """Protocol for agent plugins.

    Example:
        class CoffeePlugin:
            name = "coffee"
            version = "0.1.0"

            def __init__(self, config: dict[str, Any]) -> None:
                self.machine = config.get("machine", "default")

            def start(self, ctx: PluginStartContext) -> None:
                ctx.create_metric("coffee_counter", MeasurementType.U64, Unit.UNITY)
                ctx.add_source("counter", CoffeeSource(self.machine))

            def stop(self) -> None:
                pass
    """

    name: str
    version: str

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize with configuration."""
        ...

    def start(self, ctx: "PluginStartContext") -> None:
        """Register metrics and pipeline elements."""
        ...

    def stop(self) -> None:
        """Release resources. Called once, in reverse start order."""
        ...
