"""Measurement agent: plugin bootstrap with observable checkpoints."""

from meterline.agent.builder import Agent, AgentBuilder, Checkpoint, PluginMetadata
from meterline.agent.inspection import PipelineInspection, StartupInspection

__all__ = [
    "Agent",
    "AgentBuilder",
    "Checkpoint",
    "PipelineInspection",
    "PluginMetadata",
    "StartupInspection",
]
