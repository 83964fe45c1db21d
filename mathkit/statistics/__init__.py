"""One-variable descriptive statistics.

Example:
    from mathkit.statistics import StatisticsEngine

    engine = StatisticsEngine([1.0, 2.0, 3.0, 4.0, 5.0])
    engine.median()  # 3.0
    engine.q3()      # 4.5

"""

from .engine import (
    SAMPLE_STD_DEV_METHODS,
    AggregateResult,
    DispersionResult,
    ModeResult,
    OrderStatisticsResult,
    SampleStdDevMethod,
    StatisticsEngine,
    median_of,
    split_halves,
)

__all__ = [
    "SAMPLE_STD_DEV_METHODS",
    "AggregateResult",
    "DispersionResult",
    "ModeResult",
    "OrderStatisticsResult",
    "SampleStdDevMethod",
    "StatisticsEngine",
    "median_of",
    "split_halves",
]
