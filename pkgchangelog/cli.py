import signal
import sys
from typing import IO, List, Optional

import click

from pkgchangelog.config import DEBUG, set_log_level
from pkgchangelog.errors import ChangelogError
from pkgchangelog.loader import read_changelog, sort_entries
from pkgchangelog.render import RENDERERS, render
from pkgchangelog.version import VERSION

PROG_NAME = "pkgchangelog"
USAGE = "Usage: %s <rpm|deb> < changelog.yaml" % PROG_NAME

options = {}


def convert(fmt: str, reader: IO, writer: IO) -> None:
    """Read a YAML changelog from reader and write it to writer in fmt.

    The whole output is rendered before the single write, so nothing reaches
    writer when any step fails.
    """
    document = read_changelog(reader)
    document = document._replace(entries=sort_entries(document.entries))
    writer.write(render(document, fmt))


@click.command()
@click.option("--debug", is_flag=True, default=DEBUG, help="Enable debug mode.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Set logging level.",
)
@click.version_option(VERSION, prog_name=PROG_NAME)
@click.argument("fmt", metavar="<rpm|deb>", type=click.Choice(sorted(RENDERERS)))
@click.pass_context
def cli(ctx, debug, log_level, fmt):
    """
    Convert a YAML changelog read from stdin into a debian or rpm changelog.

    \b
    Example:
        pkgchangelog deb < changelog.yaml > debian/changelog
    """
    options["debug"] = debug
    options["log_level"] = log_level or ("DEBUG" if debug else None)
    set_log_level(options["log_level"])

    streams = ctx.obj or {}
    reader = streams.get("stdin") or sys.stdin
    writer = streams.get("stdout") or sys.stdout
    convert(fmt, reader, writer)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[IO] = None,
    stdout: Optional[IO] = None,
    stderr: Optional[IO] = None,
) -> int:
    """Run the command line with explicit streams and return the exit code

    :param argv: Arguments without the program name, defaults to ``sys.argv[1:]``
    :param stdin: Reader for the changelog document, defaults to ``sys.stdin``
    :param stdout: Writer for the rendered changelog, defaults to ``sys.stdout``
    :param stderr: Writer for error messages, defaults to ``sys.stderr``
    """
    stderr = stderr or sys.stderr
    options.clear()
    try:
        exit_code = cli.main(
            args=argv,
            prog_name=PROG_NAME,
            standalone_mode=False,
            obj={"stdin": stdin, "stdout": stdout},
        )
    except click.UsageError as e:
        stderr.write("Error: %s\n%s\n" % (e.format_message(), USAGE))
        return 1
    except (click.ClickException, ChangelogError) as e:
        if options.get("debug"):
            raise
        stderr.write("Error: %s\n" % e)
        return 1
    # --help and --version exit through click with their own code
    if isinstance(exit_code, int):
        return exit_code
    return 0


def safe_cli():  # pragma: no cover
    if not DEBUG:
        signal.signal(signal.SIGINT, signal.SIG_DFL)
    sys.exit(main())


if __name__ == "__main__":
    safe_cli()
