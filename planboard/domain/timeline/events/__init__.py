from .domain_events import DensityWarning

__all__ = ["DensityWarning"]
