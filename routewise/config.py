"""
Configuration defaults for RouteWise.

Transport speeds, fares and optimisation limits are grouped into small
dataclasses. Callers that need different values build their own
``AppConfig`` and pass it down; ``DEFAULT_CONFIG`` is used otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TransportConfig:
    walking_speed_mph: float = 3.0
    subway_fare_usd: float = 3.00
    # segments shorter than this are walked in mixed mode
    walk_threshold_miles: float = 0.5
    subway_minutes_per_stop: float = 15.0
    subway_buffer_minutes: float = 20.0
    mixed_subway_segment_minutes: float = 15.0


@dataclass(frozen=True)
class OptimisationConfig:
    algorithm: str = "2-opt"  # "greedy" or "2-opt"
    max_stops: int = 50
    max_iterations: int = 100


@dataclass(frozen=True)
class AppConfig:
    transport: TransportConfig = field(default_factory=TransportConfig)
    optimisation: OptimisationConfig = field(default_factory=OptimisationConfig)


DEFAULT_CONFIG = AppConfig()
