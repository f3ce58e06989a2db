# src/meterline/plugins/hookspecs.py
"""pluggy hook specifications for the agent bootstrap checkpoints.

The agent calls these hooks at fixed points of its startup sequence.
Implementations observe the state reached so far; they must not mutate it.
Raising from an implementation aborts the bootstrap.

Usage (observing a checkpoint):
    from meterline.plugins.hookspecs import hookimpl

    class BootstrapObserver:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def meterline_after_plugins_start(self, startup):
            assert startup.metrics.by_name("cpu_energy") is not None

    builder.register_hooks(BootstrapObserver())

Order within the bootstrap:
    1. meterline_after_plugins_init   - plugins instantiated, not started
    2. meterline_after_plugins_start  - plugins started, metrics registered
    3. meterline_before_operation_begin - pipeline built, not yet running
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from meterline.agent.inspection import PipelineInspection, StartupInspection
    from meterline.plugins.protocols import PluginProtocol

# Project name for pluggy
PROJECT_NAME = "meterline"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class MeterlineBootstrapSpec:
    """Hook specifications for the bootstrap checkpoints."""

    @hookspec
    def meterline_after_plugins_init(self, plugins: list["PluginProtocol"]) -> None:
        """Called once every plugin has been instantiated, before any starts.

        Args:
            plugins: Initialized plugins, in load order
        """

    @hookspec
    def meterline_after_plugins_start(self, startup: "StartupInspection") -> None:
        """Called once every plugin has started.

        Args:
            startup: Read-only view of the registered metrics and plugins
        """

    @hookspec
    def meterline_before_operation_begin(self, pipeline: "PipelineInspection") -> None:
        """Called when the pipeline is built, before it starts running.

        Args:
            pipeline: Read-only snapshot of the registered pipeline elements
        """
