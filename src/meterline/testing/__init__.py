"""Test support for code running on the Meterline agent.

Import patterns:
    from meterline.testing import StartupExpectations, StartupExpectationError
"""

from meterline.testing.constants import TESTER_PLUGIN_NAME, TESTER_SOURCE, TESTER_SOURCE_NAME
from meterline.testing.errors import ExpectationsSealedError, StartupExpectationError
from meterline.testing.startup import ExpectedMetric, StartupExpectations

__all__ = [
    "TESTER_PLUGIN_NAME",
    "TESTER_SOURCE",
    "TESTER_SOURCE_NAME",
    "ExpectationsSealedError",
    "ExpectedMetric",
    "StartupExpectationError",
    "StartupExpectations",
]
