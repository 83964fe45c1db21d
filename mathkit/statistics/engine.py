"""One-variable descriptive statistics.

This module provides StatisticsEngine, an immutable view over a finite
sample of real observations. The engine is validated and sorted once at
construction; every statistic afterwards is a pure read of that state and
is cached on first use.

Quartiles use the Moore-McCabe split: the sorted sample is cut into a lower
and an upper half of ``n // 2`` elements each (the median is excluded when
``n`` is odd) and Q1/Q3 are the medians of those halves.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import Literal

from mathkit.errors import EmptyInputError, InsufficientDataError

logger = logging.getLogger(__name__)

SampleStdDevMethod = Literal["scaled", "textbook"]

SAMPLE_STD_DEV_METHODS: tuple[str, ...] = ("scaled", "textbook")


@dataclass(frozen=True)
class AggregateResult:
    """Order-independent totals of a sample.

    Attributes:
        sum: Sum of all observations.
        sum_squared: Sum of each observation squared.
        mean: Arithmetic mean.

    """

    sum: float
    sum_squared: float
    mean: float


@dataclass(frozen=True)
class DispersionResult:
    """Spread of a sample around its mean.

    Attributes:
        population_variance: Mean squared deviation from the mean.
        population_std_dev: Square root of the population variance.
        sample_std_dev: Sample standard deviation, or None for fewer than two
            observations.

    """

    population_variance: float
    population_std_dev: float
    sample_std_dev: float | None


@dataclass(frozen=True)
class OrderStatisticsResult:
    """Statistics read from the sorted sample.

    Attributes:
        min: Smallest observation.
        max: Largest observation.
        median: Middle value (mean of the two middle values for even counts).
        q1: Median of the lower half.
        q3: Median of the upper half.

    """

    min: float
    max: float
    median: float
    q1: float
    q3: float


@dataclass(frozen=True)
class ModeResult:
    """Most frequent observation and how often it occurs."""

    value: float
    frequency: int


def _sort_key(value: float) -> tuple[bool, float]:
    # NaN compares false against everything, so it is pushed past the end
    return (math.isnan(value), value)


def median_of(ordered: Sequence[float]) -> float:
    """Calculate the median of an already sorted, non-empty sequence.

    Args:
        ordered: Values in ascending order.

    Returns:
        Middle value for odd lengths, mean of the two middle values otherwise.

    """
    n = len(ordered)
    mid = n // 2

    if n % 2 == 1:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def split_halves(ordered: Sequence[float]) -> tuple[Sequence[float], Sequence[float]]:
    """Split a sorted sequence into the halves used for quartiles.

    A single-element sequence is its own lower and upper half.

    Args:
        ordered: Values in ascending order.

    Returns:
        Tuple of (lower half, upper half).

    """
    n = len(ordered)
    if n == 1:
        return ordered, ordered

    half = n // 2
    return ordered[:half], ordered[n - half :]


class StatisticsEngine:
    """Descriptive statistics over a fixed sample of real observations.

    The sample is converted to floats once, kept in insertion order (``raw``)
    and as a stably sorted copy (``sorted_values``). Instances are never
    mutated after construction, so they can be shared between threads.

    Example:
        engine = StatisticsEngine([1, 2, 3, 4])
        engine.mean()    # 2.5
        engine.q1()      # 1.5

    """

    def __init__(
        self,
        observations: Iterable[float],
        sample_std_dev_method: SampleStdDevMethod = "scaled",
    ) -> None:
        """Validate and sort the sample.

        Args:
            observations: Finite sequence of real numbers.
            sample_std_dev_method: ``"scaled"`` multiplies the population
                standard deviation by ``n / (n - 1)``; ``"textbook"`` takes the
                square root of the squared deviations divided by ``n - 1``.

        Raises:
            EmptyInputError: If no observations are supplied.
            ValueError: If the method name is unknown.

        """
        if sample_std_dev_method not in SAMPLE_STD_DEV_METHODS:
            raise ValueError(
                f"Unknown sample standard deviation method: {sample_std_dev_method!r} "
                f"(expected one of {', '.join(SAMPLE_STD_DEV_METHODS)})"
            )

        raw = tuple(float(v) for v in observations)
        if not raw:
            raise EmptyInputError("Cannot compute statistics of an empty sample")

        self._raw = raw
        self._sorted = tuple(sorted(raw, key=_sort_key))
        self._method: SampleStdDevMethod = sample_std_dev_method

        logger.debug(f"Built statistics engine over {len(raw)} observations")

    # -------------------------------------------------------------------------
    # Stored sample
    # -------------------------------------------------------------------------

    @property
    def raw(self) -> tuple[float, ...]:
        """Observations in the order they were supplied."""
        return self._raw

    @property
    def sorted_values(self) -> tuple[float, ...]:
        """Observations in ascending order (NaN last)."""
        return self._sorted

    @property
    def count(self) -> int:
        """Number of observations."""
        return len(self._raw)

    @property
    def sample_std_dev_method(self) -> SampleStdDevMethod:
        """Formula used by sample_std_dev()."""
        return self._method

    # -------------------------------------------------------------------------
    # Cached results
    # -------------------------------------------------------------------------

    @cached_property
    def aggregate(self) -> AggregateResult:
        """Sum, sum of squares and mean, summed in index order."""
        total = sum(self._raw)
        return AggregateResult(
            sum=total,
            sum_squared=sum(v * v for v in self._raw),
            mean=total / self.count,
        )

    @cached_property
    def dispersion(self) -> DispersionResult:
        """Population variance and standard deviations."""
        n = self.count
        mean = self.aggregate.mean
        squared_deviations = sum((v - mean) ** 2 for v in self._raw)
        variance = squared_deviations / n
        std_dev = math.sqrt(variance)

        sample: float | None = None
        if n >= 2:
            if self._method == "scaled":
                sample = std_dev * n / (n - 1)
            else:
                sample = math.sqrt(squared_deviations / (n - 1))

        return DispersionResult(
            population_variance=variance,
            population_std_dev=std_dev,
            sample_std_dev=sample,
        )

    @cached_property
    def order_statistics(self) -> OrderStatisticsResult:
        """Min, max, median and quartiles of the sorted sample."""
        lower, upper = split_halves(self._sorted)
        return OrderStatisticsResult(
            min=self._sorted[0],
            max=self._sorted[-1],
            median=median_of(self._sorted),
            q1=median_of(lower),
            q3=median_of(upper),
        )

    @cached_property
    def mode_result(self) -> ModeResult:
        """Most frequent value; ties go to the numerically smallest value.

        Values are matched exactly. Any NaN observation makes the mode NaN.
        """
        nan_count = sum(1 for v in self._raw if math.isnan(v))
        if nan_count:
            return ModeResult(value=math.nan, frequency=nan_count)

        counter = Counter(self._raw)
        max_freq = max(counter.values())
        modes = [v for v, freq in counter.items() if freq == max_freq]
        return ModeResult(value=min(modes), frequency=max_freq)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def sum(self) -> float:
        return self.aggregate.sum

    def sum_squared(self) -> float:
        return self.aggregate.sum_squared

    def mean(self) -> float:
        return self.aggregate.mean

    def population_variance(self) -> float:
        return self.dispersion.population_variance

    def population_std_dev(self) -> float:
        return self.dispersion.population_std_dev

    def sample_std_dev(self) -> float:
        """Return the sample standard deviation.

        Raises:
            InsufficientDataError: If the sample has fewer than two observations.

        """
        sample = self.dispersion.sample_std_dev
        if sample is None:
            raise InsufficientDataError(
                f"Sample standard deviation needs at least 2 observations, got {self.count}"
            )
        return sample

    def min(self) -> float:
        return self.order_statistics.min

    def max(self) -> float:
        return self.order_statistics.max

    def median(self) -> float:
        return self.order_statistics.median

    def q1(self) -> float:
        return self.order_statistics.q1

    def q3(self) -> float:
        return self.order_statistics.q3

    def mode(self) -> float:
        return self.mode_result.value

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self.count

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, StatisticsEngine):
            return NotImplemented
        return self._sorted == other._sorted and self._method == other._method

    def __hash__(self) -> int:
        return hash((self._sorted, self._method))

    def __repr__(self) -> str:
        return f"StatisticsEngine(count={self.count}, sample_std_dev_method={self._method!r})"
