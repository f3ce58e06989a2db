"""Shared contracts for cross-boundary data types.

Measurement types, units, metric definitions and element identifiers are
shared by plugins, the agent and the test support code. This package is a
LEAF MODULE with no outbound dependencies to core or agent.
"""

from meterline.contracts.measurement import MeasurementType
from meterline.contracts.metrics import MetricDefinition, MetricId, MetricLookup
from meterline.contracts.naming import OutputName, SourceName, TransformName
from meterline.contracts.units import PrefixedUnit, Unit, UnitPrefix

__all__ = [
    "MeasurementType",
    "MetricDefinition",
    "MetricId",
    "MetricLookup",
    "OutputName",
    "PrefixedUnit",
    "SourceName",
    "TransformName",
    "Unit",
    "UnitPrefix",
]
