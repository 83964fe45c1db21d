"""Command-line interface for mathkit.

Commands:
    stats     Descriptive statistics of a sample
    solve     Solve a linear equation a*x + b = c
    distance  Euclidean distance between points
    complex   Complex number arithmetic

Negative numbers as positional arguments must follow ``--``, e.g.
``mathkit solve -- -3 -2 -1``.
"""

import logging
import re
import sys
from pathlib import Path
from typing import NoReturn, TextIO

import click

from mathkit import __version__
from mathkit.config import ConfigLoader, ConfigurationError, LoggingConfig, MathkitConfig
from mathkit.equation import LinearEquation
from mathkit.errors import MathkitError
from mathkit.expr import ComplexNumber, Coordinate
from mathkit.reporting import OUTPUT_FORMATS, StatisticsReport
from mathkit.statistics import SAMPLE_STD_DEV_METHODS, StatisticsEngine
from mathkit.utils.numbers import format_number

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")

COMPLEX_OPERATIONS = ("add", "subtract", "multiply", "divide", "compare")


def _configure_logging(config: LoggingConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.level)
    logging.basicConfig(level=level, format=config.format)


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _parse_observations(text: str) -> list[float]:
    """Parse whitespace or comma separated numbers, ignoring ``#`` comments.

    Args:
        text: Raw file contents

    Returns:
        Observations in file order

    Raises:
        click.BadParameter: If a token is not a number

    """
    observations = []
    for line in text.splitlines():
        line = line.split("#", 1)[0]
        for token in _SEPARATORS.split(line.strip()):
            if not token:
                continue
            try:
                observations.append(float(token))
            except ValueError:
                raise click.BadParameter(f"not a number: {token!r}", param_hint="--file")
    return observations


def _parse_components(text: str, param_hint: str) -> list[float]:
    try:
        return [float(part) for part in text.split(",")]
    except ValueError:
        raise click.BadParameter(
            f"expected comma separated numbers, got {text!r}", param_hint=param_hint
        )


def _parse_point(text: str, param_hint: str) -> Coordinate:
    components = _parse_components(text, param_hint)
    if len(components) not in (2, 3):
        raise click.BadParameter(
            f"a point needs 2 or 3 components, got {len(components)}", param_hint=param_hint
        )
    return Coordinate(*components)


def _parse_complex(text: str, param_hint: str) -> ComplexNumber:
    components = _parse_components(text, param_hint)
    if len(components) not in (1, 2):
        raise click.BadParameter(
            f"a complex number is written 'real' or 'real,imag', got {text!r}",
            param_hint=param_hint,
        )
    return ComplexNumber(*components)


@click.group()
@click.version_option(version=__version__, prog_name="mathkit")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="YAML file overriding config/defaults.yaml.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Verbose output (debug logging).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """mathkit - Small mathematical utilities.

    Descriptive statistics, linear equations, coordinates and complex numbers.
    """
    try:
        config = ConfigLoader().load(config_path)
    except ConfigurationError as e:
        _fail(str(e))

    _configure_logging(config.logging, verbose)
    logger.debug(f"Using configuration: {config.model_dump()}")
    ctx.obj = config


@cli.command()
@click.argument("values", nargs=-1, type=float)
@click.option(
    "--file",
    "-f",
    "input_file",
    type=click.File("r"),
    help="Read observations from a file ('-' for stdin).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Report format (default: from config, text).",
)
@click.option(
    "--precision",
    "-p",
    type=click.IntRange(0, 15),
    help="Decimal places for reported values.",
)
@click.option(
    "--sample-sd",
    type=click.Choice(SAMPLE_STD_DEV_METHODS),
    help="Sample standard deviation formula (default: scaled).",
)
@click.pass_obj
def stats(
    config: MathkitConfig,
    values: tuple[float, ...],
    input_file: TextIO | None,
    output_format: str | None,
    precision: int | None,
    sample_sd: str | None,
) -> None:
    """Describe a sample of observations.

    VALUES are the observations; more can be read with --file.

    Examples:

        mathkit stats 1 2 3 4

        mathkit stats --file samples.txt --format json
    """
    observations = list(values)
    if input_file is not None:
        observations.extend(_parse_observations(input_file.read()))

    try:
        engine = StatisticsEngine(
            observations,
            sample_std_dev_method=sample_sd or config.statistics.sample_std_dev,
        )
    except MathkitError as e:
        _fail(str(e))

    report = StatisticsReport(
        engine,
        precision=precision if precision is not None else config.output.precision,
    )
    click.echo(report.render(output_format or config.output.format), nl=False)


@cli.command()
@click.argument("a", type=float)
@click.argument("b", type=float)
@click.argument("c", type=float, default=0.0, required=False)
@click.pass_obj
def solve(config: MathkitConfig, a: float, b: float, c: float) -> None:
    """Solve the linear equation A*x + B = C (C defaults to 0).

    Examples:

        mathkit solve 2 2 9

        mathkit solve -- -3 -2 -1
    """
    try:
        equation = LinearEquation(a, b, c)
    except MathkitError as e:
        _fail(str(e))

    click.echo(equation.to_string(config.expression.display_digits))


@cli.command()
@click.argument("point")
@click.argument("other", required=False)
@click.pass_obj
def distance(config: MathkitConfig, point: str, other: str | None) -> None:
    """Distance from POINT to OTHER, or to the origin.

    Points are written x,y or x,y,z.

    Examples:

        mathkit distance 3,4

        mathkit distance 1,2,3 4,6,3
    """
    start = _parse_point(point, "POINT")
    end = _parse_point(other, "OTHER") if other is not None else None

    try:
        result = start.distance(end)
    except MathkitError as e:
        _fail(str(e))

    click.echo(format_number(result, config.expression.display_digits))


@cli.command("complex")
@click.argument("operation", type=click.Choice(COMPLEX_OPERATIONS))
@click.argument("left")
@click.argument("right")
@click.pass_obj
def complex_command(config: MathkitConfig, operation: str, left: str, right: str) -> None:
    """Apply OPERATION to the complex numbers LEFT and RIGHT.

    Numbers are written real,imag (or just real). 'compare' reports whether
    both parts agree within the configured tolerance.

    Examples:

        mathkit complex add 3,2 1,-1

        mathkit complex divide 1,1 0,1
    """
    a = _parse_complex(left, "LEFT")
    b = _parse_complex(right, "RIGHT")

    if operation == "compare":
        close = a.is_close(b, tolerance=config.expression.equality_tolerance)
        click.echo("equal" if close else "not equal")
        return

    try:
        result = getattr(a, operation)(b)
    except MathkitError as e:
        _fail(str(e))

    click.echo(result.to_string(config.expression.display_digits))


if __name__ == "__main__":
    cli()
