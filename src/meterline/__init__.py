"""
Meterline: a plugin-based measurement agent with declarative startup checks.

Plugins register metrics and pipeline elements while the agent boots;
tests describe the state they expect and the agent verifies it at each
bootstrap checkpoint.
"""

__version__ = "0.1.0"
