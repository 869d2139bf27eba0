"""Runtime services shared by the motion engine and host adapters."""

from . import telemetry

__all__ = ["telemetry"]
