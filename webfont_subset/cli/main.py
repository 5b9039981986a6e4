"""
Main CLI entry point for webfont-subset.
"""

from pathlib import Path

import click

from webfont_subset import __version__
from webfont_subset.config.options import (
    DEFAULT_EXECUTABLE,
    DEFAULT_FLAVOR,
    BackendChoice,
    Flavor,
)
from webfont_subset.config.paths import INPUT_DIR, OUTPUT_DIR
from webfont_subset.utils.logging import set_verbose


def split_subsets(ctx, param, value):
    """Accept both --subsets latin,greek and repeated --subsets options."""
    names = [name for item in value for name in item.split(",") if name.strip()]
    if not names:
        raise click.BadParameter("at least one subset name is required")
    return names


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """Subset fonts to named Unicode ranges and write web fonts."""
    set_verbose(verbose)


@cli.command()
@click.option(
    "-s",
    "--subsets",
    multiple=True,
    required=True,
    callback=split_subsets,
    help="Comma-separated subset names, e.g. latin,cyrillic.",
)
@click.option(
    "--backend",
    type=click.Choice([b.value for b in BackendChoice]),
    default=BackendChoice.LIBRARY.value,
    show_default=True,
    help="Subsetting engine.",
)
@click.option(
    "-f",
    "--flavor",
    type=click.Choice([f.value for f in Flavor]),
    default=None,
    help="Output flavor (pyftsubset backend only). Defaults to woff2.",
)
@click.option(
    "-j", "--jobs", type=click.IntRange(min=1), default=None, help="Worker threads."
)
@click.option(
    "--input",
    "input_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=INPUT_DIR,
    show_default=True,
    help="Directory containing source fonts.",
)
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=OUTPUT_DIR,
    show_default=True,
    help="Directory for subsetted fonts.",
)
@click.option(
    "--executable",
    default=DEFAULT_EXECUTABLE,
    show_default=True,
    help="pyftsubset executable used by the pyftsubset backend.",
)
@click.option("--no-progress", is_flag=True, help="Do not draw a progress bar.")
def subset(subsets, backend, flavor, jobs, input_dir, output_dir, executable, no_progress):
    """Subset fonts in the input directory."""
    from webfont_subset.operations.subset import subset_fonts

    choice = BackendChoice(backend)
    if flavor is not None and choice is BackendChoice.LIBRARY:
        raise click.UsageError(
            "--flavor is not supported by the library backend (always woff2)"
        )

    subset_fonts(
        subsets,
        backend=choice,
        flavor=Flavor(flavor) if flavor else DEFAULT_FLAVOR,
        input_dir=input_dir,
        output_dir=output_dir,
        jobs=jobs,
        executable=executable,
        show_progress=not no_progress,
    )


@cli.command()
@click.option(
    "--input",
    "input_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=INPUT_DIR,
    show_default=True,
    help="Directory containing fonts to inspect.",
)
def inspect(input_dir):
    """Print basic metadata for each input font."""
    from webfont_subset.operations.inspect import inspect_fonts

    inspect_fonts(input_dir)


@cli.command("list-subsets")
def list_subsets():
    """List the built-in subset names."""
    from webfont_subset.core.catalog import DEFAULT_CATALOG

    for name in DEFAULT_CATALOG.names():
        click.echo(f"{name}: {', '.join(DEFAULT_CATALOG.tokens(name))}")


if __name__ == "__main__":
    cli()
