"""Text, Markdown and JSON reports for a statistics engine."""

from typing import Literal

from mathkit.statistics import StatisticsEngine

from .summary import DescriptiveSummary

OutputFormat = Literal["text", "json", "markdown"]

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "markdown")

# (label, DescriptiveSummary field) in report order
REPORT_ROWS: tuple[tuple[str, str], ...] = (
    ("mean", "mean"),
    ("sum", "sum"),
    ("sum^2", "sum_squared"),
    ("sample SD", "sample_std_dev"),
    ("SD", "std_dev"),
    ("n", "count"),
    ("min", "min"),
    ("max", "max"),
    ("mode", "mode"),
    ("median", "median"),
    ("Q1", "q1"),
    ("Q3", "q3"),
)

UNDEFINED = "undefined"


class StatisticsReport:
    """Renders one engine's statistics in a fixed order."""

    def __init__(self, engine: StatisticsEngine, precision: int | None = None) -> None:
        """Initialize the report.

        Args:
            engine: Engine whose statistics are rendered
            precision: Decimal places for float values; None uses str()

        """
        self.summary = DescriptiveSummary.from_engine(engine)
        self.precision = precision

    def _format_value(self, value: float | int | None) -> str:
        if value is None:
            return UNDEFINED
        if isinstance(value, int) or self.precision is None:
            return str(value)
        return f"{value:.{self.precision}f}"

    def rows(self) -> list[tuple[str, str]]:
        """Return (label, rendered value) pairs in report order."""
        return [
            (label, self._format_value(getattr(self.summary, field)))
            for label, field in REPORT_ROWS
        ]

    def to_text(self) -> str:
        """One ``label=value`` line per statistic."""
        return "".join(f"{label}={value}\n" for label, value in self.rows())

    def to_markdown(self) -> str:
        lines = ["| Statistic | Value |", "|-----------|-------|"]
        lines.extend(f"| {label} | {value} |" for label, value in self.rows())
        return "\n".join(lines) + "\n"

    def to_json(self, indent: int = 2) -> str:
        return self.summary.to_json(indent=indent)

    def render(self, output_format: OutputFormat = "text") -> str:
        """Render in the requested format.

        Raises:
            ValueError: If the format is unknown

        """
        if output_format == "text":
            return self.to_text()
        if output_format == "markdown":
            return self.to_markdown()
        if output_format == "json":
            return self.to_json() + "\n"
        raise ValueError(f"Unknown output format: {output_format}")
