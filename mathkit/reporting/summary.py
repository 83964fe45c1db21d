"""Serializable summary of a statistics engine."""

from pydantic import BaseModel, ConfigDict, Field

from mathkit.statistics import StatisticsEngine


class DescriptiveSummary(BaseModel):
    """Every descriptive statistic of one sample."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    mean: float = Field(..., description="Arithmetic mean")
    sum: float = Field(..., description="Sum of observations")
    sum_squared: float = Field(..., description="Sum of squared observations")
    sample_std_dev: float | None = Field(
        default=None, description="Sample standard deviation (None for n < 2)"
    )
    std_dev: float = Field(..., description="Population standard deviation")
    count: int = Field(..., ge=1, description="Number of observations")
    min: float = Field(..., description="Minimum value")
    max: float = Field(..., description="Maximum value")
    mode: float = Field(..., description="Most frequent value")
    median: float = Field(..., description="Median value")
    q1: float = Field(..., description="First quartile")
    q3: float = Field(..., description="Third quartile")

    @classmethod
    def from_engine(cls, engine: StatisticsEngine) -> "DescriptiveSummary":
        """Collect every statistic from an engine.

        Args:
            engine: Engine to summarize

        Returns:
            Summary with ``sample_std_dev`` left as None for single observations

        """
        order = engine.order_statistics
        return cls(
            mean=engine.mean(),
            sum=engine.sum(),
            sum_squared=engine.sum_squared(),
            sample_std_dev=engine.dispersion.sample_std_dev,
            std_dev=engine.population_std_dev(),
            count=engine.count,
            min=order.min,
            max=order.max,
            mode=engine.mode(),
            median=order.median,
            q1=order.q1,
            q3=order.q3,
        )

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return self.model_dump_json(indent=indent)
