"""
Shared compute infrastructure for sumstats.

Domain-specific backends live in {domain}/backends/. This module holds
the helpers they share.

Submodules:
    timing: Execution timing utilities
"""

from sumstats.core.compute.timing import Timer

__all__ = [
    "Timer",
]
