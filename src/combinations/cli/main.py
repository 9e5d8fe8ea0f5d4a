"""CLI commands for combinations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from combinations.config import CombinationsConfig, load_config
from combinations.config.settings import VALID_STRATEGIES
from combinations.counter import Counter
from combinations.enumerator import Enumerator
from combinations.errors import ConfigValidationError, CountOverflowError
from combinations.generator import Generator
from combinations.lexor import Lexor

console = Console()

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_OVERFLOW = 2
EXIT_LIMIT_EXCEEDED = 3


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _bits_option(bits: int | None, unbounded: bool, default: int | None) -> int | None:
    if unbounded:
        return None
    return bits if bits is not None else default


def _echo_combinations(combinations: Iterable[list[int]]) -> None:
    for comb in combinations:
        click.echo(" ".join(str(elem) for elem in comb))


@click.group()
@click.version_option(package_name="combinations")
def cli() -> None:
    """Count, generate, enumerate and index m-element subsets of {0..n-1}."""


@cli.command()
@click.argument("n", type=click.IntRange(min=0))
@click.argument("m", type=click.IntRange(min=0))
@click.option("--bits", type=click.IntRange(min=1), default=64, show_default=True, help="Counter width")
@click.option("--unbounded", is_flag=True, help="Count with unbounded integers")
def count(n: int, m: int, bits: int, unbounded: bool) -> None:
    """Print the number of M-element subsets of an N-element set."""
    try:
        click.echo(Counter(None if unbounded else bits).count(n, m))
    except CountOverflowError as e:
        console.print(f"[red]{e.message}[/red]")
        raise SystemExit(EXIT_OVERFLOW)


@cli.command()
@click.option("-n", "--n-size", "n", type=click.IntRange(min=0), default=None, help="Size of set")
@click.option("-m", "--m-size", "m", type=click.IntRange(min=0), default=None, help="Size of subsets")
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Largest count to generate")
@click.option(
    "--strategy",
    type=click.Choice(VALID_STRATEGIES),
    default=None,
    help="recursive (default), iterative, or enumerator",
)
@click.option("-i", "--iterative", is_flag=True, help="Use the iterative generator")
@click.option("-e", "--enumerate", "use_enumerator", is_flag=True, help="Use the step enumerator")
@click.option("-p", "--print", "print_combinations", is_flag=True, help="Print the combinations")
@click.option("--bits", type=click.IntRange(min=1), default=None, help="Counter width (default 64)")
@click.option("--unbounded", is_flag=True, help="Count with unbounded integers")
@click.option("--strict", is_flag=True, help="Non-zero exit on overflow or limit exceeded")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def generate(
    n: int | None,
    m: int | None,
    limit: int | None,
    strategy: str | None,
    iterative: bool,
    use_enumerator: bool,
    print_combinations: bool,
    bits: int | None,
    unbounded: bool,
    strict: bool,
    config_file: str | None,
    verbose: bool,
) -> None:
    """Generate every M-element subset of {0..N-1}.

    The count is computed first. Generation is skipped if it exceeds the
    limit or overflows the counter width.

    Exit codes:
        0 - Generated, or a condition was reported (default)
        1 - Invalid configuration
        2 - Count overflow (with --strict)
        3 - Count exceeds limit (with --strict)

    Examples:
        combinations generate -n 5 -m 2 -p
        combinations generate -n 40 -m 20 --limit 1000 --strict
    """
    try:
        config = load_config(config_file)
    except ConfigValidationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(e.message)}")
        raise SystemExit(EXIT_CONFIG_ERROR)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise SystemExit(EXIT_CONFIG_ERROR)

    settings = _merge_options(
        config,
        n=n,
        m=m,
        limit=limit,
        strategy="enumerator" if use_enumerator else "iterative" if iterative else strategy,
        print_combinations=print_combinations,
        bits=_bits_option(bits, unbounded, config.bits),
        strict=strict,
        verbose=verbose,
    )
    _configure_logging(settings.verbose)
    raise SystemExit(run_generate(settings))


def _merge_options(config: CombinationsConfig, **options) -> CombinationsConfig:
    """Apply command line options on top of the loaded configuration."""
    updates = {
        key: value
        for key, value in options.items()
        if key in ("n", "m", "limit", "strategy") and value is not None
    }
    updates["bits"] = options["bits"]
    updates["print_combinations"] = config.print_combinations or options["print_combinations"]
    updates["strict_exit"] = config.strict_exit or options["strict"]
    updates["verbose"] = config.verbose or options["verbose"]
    return config.model_copy(update=updates)


def run_generate(settings: CombinationsConfig) -> int:
    """Run one generation as configured and return the exit code."""
    n, m = settings.n, settings.m
    try:
        total = Counter(settings.bits).count(n, m)
    except CountOverflowError as e:
        console.print(f"[red]Overflow:[/red] {e.message}")
        return EXIT_OVERFLOW if settings.strict_exit else EXIT_OK

    if total > settings.limit:
        console.print(
            f"[yellow]Number of combinations {total} exceeds the limit {settings.limit}[/yellow]"
        )
        return EXIT_LIMIT_EXCEEDED if settings.strict_exit else EXIT_OK

    base = list(range(n))
    if settings.strategy == "enumerator":
        enumerator = Enumerator(base)
        produced = 0
        for comb in enumerator.iterate(m):
            produced += 1
            if settings.print_combinations:
                _echo_combinations([comb])
        console.print(f"Number of combinations: {produced}")
    else:
        gen = Generator(base, strategy=settings.strategy, bits=settings.bits)
        gen.generate(m)
        console.print(f"Number of combinations: {len(gen)}")
        if settings.print_combinations:
            _echo_combinations(gen)

    return EXIT_OK


@cli.command()
@click.argument("n", type=click.IntRange(min=0))
@click.argument("m", type=click.IntRange(min=0))
@click.argument("rank", type=click.IntRange(min=0))
@click.option("--bits", type=click.IntRange(min=1), default=64, show_default=True, help="Counter width")
@click.option("--unbounded", is_flag=True, help="Count with unbounded integers")
def get(n: int, m: int, rank: int, bits: int, unbounded: bool) -> None:
    """Print the RANK-th M-element subset of {0..N-1} in lexicographic order."""
    lexor = Lexor(list(range(n)), m=m, bits=None if unbounded else bits)
    try:
        total = len(lexor)
        comb = lexor.get(rank)
    except CountOverflowError as e:
        console.print(f"[red]{e.message}[/red]")
        raise SystemExit(EXIT_OVERFLOW)

    if rank >= total:
        console.print(f"[yellow]Rank {rank} is out of range: C({n}, {m}) = {total}[/yellow]")
        raise SystemExit(EXIT_OK)
    _echo_combinations([comb])
