"""Runtime services (telemetry) shared by the tracker and adapters."""

from . import telemetry

__all__ = ["telemetry"]
