"""Synthesize plausible business documents for batches of submission references.

The command line entry point lives in :mod:`fakedata.cli`; programmatic callers
build a :class:`~fakedata.pipeline.Orchestrator` around
:func:`~fakedata.generators.registry.build_registry`.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
