"""
Turning build profiles into colcon, ninja and ctest command lines.
"""

from .args import ArgStack
from .pipeline import (
    BasicVerb,
    BuildVerb,
    ColconInvocation,
    ConfiguredBuild,
    TestConfiguration,
    TestResultConfiguration,
    ctest_single,
    ninja_build_target,
)

__all__ = [
    "ArgStack",
    "BasicVerb",
    "BuildVerb",
    "ColconInvocation",
    "ConfiguredBuild",
    "TestConfiguration",
    "TestResultConfiguration",
    "ctest_single",
    "ninja_build_target",
]
