# src/meterline/agent/builder.py
"""Agent builder and bootstrap sequence.

The builder instantiates plugins, starts them, and freezes the pipeline
they registered. Between those steps it calls the bootstrap hooks
declared in meterline.plugins.hookspecs, so tests and observers can check
the state reached so far.

Usage:
    agent = (
        AgentBuilder([PluginMetadata(CoffeePlugin, {"machine": "kitchen"})])
        .with_expectations(startup)
        .build_and_start()
    )
    agent.shutdown()
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

import pluggy

from meterline.agent.inspection import PipelineInspection, StartupInspection
from meterline.core.config import AgentSettings
from meterline.core.logging import configure_logging, get_logger
from meterline.core.metrics import MetricRegistry
from meterline.plugins.context import PipelineElements, PluginStartContext
from meterline.plugins.hookspecs import PROJECT_NAME, MeterlineBootstrapSpec, hookimpl
from meterline.plugins.protocols import PluginProtocol

if TYPE_CHECKING:
    from meterline.testing.startup import StartupExpectations

logger = get_logger(__name__)


class Checkpoint(StrEnum):
    """Named points of the bootstrap sequence, in the order they are reached."""

    AFTER_PLUGINS_INIT = "after_plugins_init"
    AFTER_PLUGINS_START = "after_plugins_start"
    BEFORE_OPERATION_BEGIN = "before_operation_begin"

    @property
    def hook_name(self) -> str:
        return f"{PROJECT_NAME}_{self.value}"


@dataclass(frozen=True)
class PluginMetadata:
    """A plugin class to load, with the configuration passed to its constructor."""

    plugin_cls: type[PluginProtocol]
    config: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.plugin_cls.name


def create_checkpoint_hookimpl(checkpoint: Checkpoint, callback: Callable[[Any], None]) -> object:
    """Create a pluggy hookimpl object that forwards a checkpoint to a callback.

    pluggy matches hook arguments by parameter name, so each checkpoint
    gets a method with the exact argument name of its hookspec.

    Args:
        checkpoint: Checkpoint to observe
        callback: Called with the checkpoint's view as only argument

    Returns:
        Object instance with the decorated hook method
    """

    class CheckpointHookImpl:
        """Dynamically generated hook implementer."""

        def __repr__(self) -> str:
            return f"CheckpointHookImpl({checkpoint.value}, {callback!r})"

    def after_plugins_init(self: Any, plugins: list[PluginProtocol]) -> None:
        callback(plugins)

    def after_plugins_start(self: Any, startup: StartupInspection) -> None:
        callback(startup)

    def before_operation_begin(self: Any, pipeline: PipelineInspection) -> None:
        callback(pipeline)

    hook_methods: dict[Checkpoint, Callable[..., None]] = {
        Checkpoint.AFTER_PLUGINS_INIT: after_plugins_init,
        Checkpoint.AFTER_PLUGINS_START: after_plugins_start,
        Checkpoint.BEFORE_OPERATION_BEGIN: before_operation_begin,
    }

    setattr(CheckpointHookImpl, checkpoint.hook_name, hookimpl(hook_methods[checkpoint]))
    return CheckpointHookImpl()


class Agent:
    """A started agent: plugins running, pipeline elements registered."""

    def __init__(
        self,
        plugins: list[PluginProtocol],
        metrics: MetricRegistry,
        pipeline: PipelineInspection,
    ) -> None:
        self.plugins = plugins
        self.metrics = metrics
        self.pipeline = pipeline
        self._stopped = False

    @property
    def is_running(self) -> bool:
        return not self._stopped

    def shutdown(self) -> None:
        """Stop every plugin in reverse start order. Safe to call twice.

        A plugin whose stop() raises is logged and skipped; the remaining
        plugins are still stopped.
        """
        if self._stopped:
            return
        self._stopped = True
        failed = _stop_plugins(self.plugins)
        logger.info("agent_stopped", plugins=[p.name for p in self.plugins], stop_failures=failed)


def _stop_plugins(plugins: list[PluginProtocol]) -> list[str]:
    """Stop plugins in reverse order, logging failures instead of raising.

    A plugin that fails to stop must not keep the others running, nor hide
    the error that triggered a bootstrap abort.

    Returns:
        Names of the plugins whose stop() raised
    """
    failed: list[str] = []
    for plugin in reversed(plugins):
        try:
            plugin.stop()
        except Exception as e:
            logger.error(
                "agent_plugin_stop_failed",
                plugin=plugin.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            failed.append(plugin.name)
    return failed


class AgentBuilder:
    """Builds and starts an agent from plugin metadata.

    Callbacks registered for the same checkpoint follow pluggy's call
    order: the most recently registered runs first.
    """

    def __init__(self, plugins: list[PluginMetadata]) -> None:
        self._plugins = list(plugins)
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(MeterlineBootstrapSpec)

    @classmethod
    def from_settings(
        cls,
        settings: AgentSettings,
        available: list[type[PluginProtocol]],
    ) -> "AgentBuilder":
        """Create a builder for the plugins enabled in the settings.

        Also applies the logging settings, so agent and plugin logs use
        the configured level and format from here on.

        Args:
            settings: Agent settings
            available: Plugin classes the settings may refer to

        Raises:
            ValueError: If an enabled plugin has no matching class
        """
        configure_logging(json_output=settings.logging.json_output, level=settings.logging.level)
        by_name = {plugin_cls.name: plugin_cls for plugin_cls in available}
        metadata: list[PluginMetadata] = []
        for name in settings.enabled_plugins:
            if name not in by_name:
                raise ValueError(f"Unknown plugin '{name}'. Available: {sorted(by_name)}")
            metadata.append(PluginMetadata(by_name[name], dict(settings.plugins[name].config)))
        return cls(metadata)

    # === Checkpoint registration ===

    def after_plugins_init(self, callback: Callable[[list[PluginProtocol]], None]) -> "AgentBuilder":
        return self._add_callback(Checkpoint.AFTER_PLUGINS_INIT, callback)

    def after_plugins_start(self, callback: Callable[[StartupInspection], None]) -> "AgentBuilder":
        return self._add_callback(Checkpoint.AFTER_PLUGINS_START, callback)

    def before_operation_begin(self, callback: Callable[[PipelineInspection], None]) -> "AgentBuilder":
        return self._add_callback(Checkpoint.BEFORE_OPERATION_BEGIN, callback)

    def _add_callback(self, checkpoint: Checkpoint, callback: Callable[[Any], None]) -> "AgentBuilder":
        self._pm.register(create_checkpoint_hookimpl(checkpoint, callback))
        return self

    def register_hooks(self, observer: object) -> "AgentBuilder":
        """Register an object implementing one or more bootstrap hooks."""
        self._pm.register(observer)
        return self

    def with_expectations(self, expectations: "StartupExpectations") -> "AgentBuilder":
        """Attach startup expectations. The builder takes ownership of them."""
        return expectations.setup(self)

    # === Bootstrap ===

    def build_and_start(self) -> Agent:
        """Run the bootstrap sequence and return the started agent.

        Raises:
            Whatever a plugin or a hook raises. Plugins that already
            started are stopped before the exception propagates.
        """
        hook = self._pm.hook
        metrics = MetricRegistry()
        elements = PipelineElements()
        started: list[PluginProtocol] = []

        stage = "init_plugins"
        try:
            plugins = [meta.plugin_cls(meta.config) for meta in self._plugins]
            logger.info("agent_plugins_initialized", plugins=[p.name for p in plugins])
            stage = self._enter_checkpoint(Checkpoint.AFTER_PLUGINS_INIT)
            hook.meterline_after_plugins_init(plugins=list(plugins))

            stage = "start_plugins"
            for plugin in plugins:
                plugin.start(PluginStartContext(plugin.name, metrics, elements))
                started.append(plugin)
            logger.info("agent_plugins_started", plugins=len(started), metrics=len(metrics))
            stage = self._enter_checkpoint(Checkpoint.AFTER_PLUGINS_START)
            hook.meterline_after_plugins_start(startup=StartupInspection(metrics=metrics, plugins=tuple(plugins)))

            pipeline = PipelineInspection(
                sources=list(elements.sources),
                transforms=list(elements.transforms),
                outputs=list(elements.outputs),
            )
            stage = self._enter_checkpoint(Checkpoint.BEFORE_OPERATION_BEGIN)
            hook.meterline_before_operation_begin(pipeline=pipeline)
        except Exception as e:
            logger.error(
                "agent_bootstrap_failed",
                stage=stage,
                error=str(e),
                error_type=type(e).__name__,
            )
            _stop_plugins(started)
            raise

        logger.info(
            "agent_started",
            sources=len(elements.sources),
            transforms=len(elements.transforms),
            outputs=len(elements.outputs),
        )
        return Agent(plugins, metrics, pipeline)

    def _enter_checkpoint(self, checkpoint: Checkpoint) -> str:
        logger.debug(
            "agent_checkpoint_reached",
            checkpoint=checkpoint.value,
            callbacks=len(getattr(self._pm.hook, checkpoint.hook_name).get_hookimpls()),
        )
        return checkpoint.value
