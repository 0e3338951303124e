## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# shortopts — Parse shell arguments against a declaration signature and print `eval`-able assignments.
#
#   eval "$(python -m shortopts 'v=verbose t:int=ttl i:str=input' -- "$@")" || exit 1
#

import re
import sys
import logging
from dataclasses import dataclass

import click

from .errors import OptError
from .registry import Registry
from .formatting import write_without_ansi, format_assignments, format_error


@dataclass(frozen=True)
class CliConfig:
    verbose: int
    plain: bool
    permute: bool | None
    prefix: str


def _check_prefix(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if value and not re.fullmatch(r'[A-Za-z_][A-Za-z0-9_]*', value):
        raise click.BadParameter(f"`{value}` is not a shell identifier prefix.")
    return value


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING if verbose == 0 else logging.INFO if verbose == 1 else logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format='%(levelname)s %(name)s: %(message)s')


def run(config: CliConfig, signature: str, args: list[str], show_optstring: bool = False) -> int:
    registry = Registry(permute=config.permute)
    try:
        options = registry.declare_signature(signature)
        if show_optstring:
            print(registry.optstring)
            return 0
        rest = registry.parse(args)
    except OptError as exc:
        print(format_error(exc), file=sys.stderr)
        return 1

    logging.getLogger(__name__).info("parsed %d declared options, %d arguments left", len(options), len(rest))
    print(*format_assignments(options, rest, prefix=config.prefix), sep='\n')
    return 0


@click.command(context_settings={'allow_interspersed_args': False})
@click.option('--verbose', '-v', default=0, count=True, help='Log what is declared and parsed to stderr.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from diagnostics.')
@click.option('--permute/--posix', default=None, help='Allow options after positional arguments (default unless POSIXLY_CORRECT is set).')
@click.option('--prefix', default='', callback=_check_prefix, help='Prefix for every assigned shell variable name.')
@click.option('--optstring', 'show_optstring', is_flag=True, help='Print the getopt specification string and exit.')
@click.argument('signature')
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, verbose: int, plain: bool, permute: bool | None, prefix: str,
        show_optstring: bool, signature: str, args: tuple[str, ...]) -> None:
    """Declare options from SIGNATURE (e.g. `v=verbose t:int=ttl`) and parse ARGS against them."""
    config = CliConfig(verbose=verbose, plain=plain, permute=permute, prefix=prefix)
    _configure_logging(config.verbose)
    if config.plain:
        sys.stderr.write = write_without_ansi(sys.stderr.write)

    tail = list(args)
    # Options after SIGNATURE are not processed by click, so a separating `--` arrives here.
    if tail[:1] == ['--']:
        tail = tail[1:]
    ctx.exit(run(config, signature, tail, show_optstring=show_optstring))


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='shortopts')


if __name__ == "__main__":
    main()
