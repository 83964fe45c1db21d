"""Report generation for descriptive statistics.

Example:
    from mathkit.reporting import StatisticsReport
    from mathkit.statistics import StatisticsEngine

    print(StatisticsReport(StatisticsEngine([1, 2, 3])).to_text())

"""

from .report import OUTPUT_FORMATS, REPORT_ROWS, OutputFormat, StatisticsReport
from .summary import DescriptiveSummary

__all__ = [
    "OUTPUT_FORMATS",
    "REPORT_ROWS",
    "DescriptiveSummary",
    "OutputFormat",
    "StatisticsReport",
]
