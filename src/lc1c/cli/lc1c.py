"""
lc1c - LC1 Compiler Command-Line Interface
==========================================

Parses an LC1 source file, reports every bad line, and writes the canonical
form of the program.

Usage Examples
--------------
Basic compilation:
    $ lc1c prog.asm

With output file:
    $ lc1c prog.asm -o prog.lc1

CRLF line endings and no optimization:
    $ lc1c -U -O 0 prog.asm

Verbose mode:
    $ lc1c -v prog.asm
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from lc1c import __version__
from lc1c.cli.errors import ExitCode, handle_cli_exception
from lc1c.compiler import Compiler
from lc1c.config import CompilerOptions, OptimizationLevel

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
        force=True,
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Specify a compilation output filename (default: input.lc1)",
)
@click.option(
    "-U", "--unix2dos",
    is_flag=True,
    help="unix2dos mode -- insert carriage returns after each compiled line",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Be more verbose",
)
@click.option(
    "-O", "--optimize",
    type=click.Choice(["0", "1", "D"], case_sensitive=False),
    default="1",
    show_default=True,
    help="Set the optimization level; 0 = no optimization; "
         "1 = normal optimization; D = deep optimization",
)
@click.version_option(version=__version__, prog_name="lc1c")
def main(
    input_file: Path,
    output: Optional[Path],
    unix2dos: bool,
    verbose: bool,
    optimize: str,
) -> None:
    """
    High-level LC1 assembly compiler.

    INPUT_FILE is the LC1 source file to compile.

    \b
    Examples:
        lc1c prog.asm              # Outputs prog.lc1
        lc1c prog.asm -o out.lc1   # Specify output file
        lc1c -U prog.asm           # CRLF line endings
    """
    setup_logging(verbose)

    options = CompilerOptions(
        output=output,
        unix2dos=unix2dos,
        verbose=verbose,
        optimization=OptimizationLevel.from_flag(optimize),
    )
    output_file = options.resolve_output(input_file)

    logger.debug("Optimization level: %s", options.optimization)
    if unix2dos:
        logger.debug("unix2dos mode enabled: lines end with CRLF")

    try:
        compiler = Compiler(options)
        compiler.compile_file(input_file)

        if compiler.has_errors():
            click.echo(compiler.get_error_report(), err=True)
            sys.exit(ExitCode.BUILD_ERROR)

        compiler.write_output(output_file)
        logger.debug("Wrote %s", output_file)

    except Exception as e:
        handle_cli_exception(e, verbose, "Compilation")


if __name__ == "__main__":
    main()
