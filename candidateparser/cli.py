# candidateparser/cli.py
import json
import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from .candidate import IceCandidate
from .config import load_settings, FORMATS
from .errors import CandidateParseError
from .logging_config import setup_logging
from .parser import parse
from .util import iter_candidate_lines


app = typer.Typer(add_completion=False, help="ICE candidate lines → structured fields")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("candidateparser.cli")


def _candidate_table(c: IceCandidate, title: str) -> Table:
    table = Table(title=escape(title), box=box.SIMPLE_HEAVY, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    dash = "-"
    rows = [
        ("Foundation", c.foundation),
        ("Component ID", c.component_id),
        ("Transport", c.transport),
        ("Priority", c.priority),
        ("Address", c.connection_address),
        ("Port", c.port),
        ("Type", c.candidate_type),
        ("Rel Addr", dash if c.rel_addr is None else c.rel_addr),
        ("Rel Port", dash if c.rel_port is None else c.rel_port),
    ]
    for name, value in rows:
        table.add_row(name, escape(str(value)))
    if c.extensions:
        ext = "\n".join(f"{k} => {v}" for k, v in c.extensions.items())
    else:
        ext = dash
    table.add_row("Extensions", escape(ext))
    return table


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
):
    try:
        s = load_settings()
    except RuntimeError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)
    setup_logging(s, verbose, err_console)
    ctx.obj = s


@app.command("parse")
def parse_cmd(
    ctx: typer.Context,
    lines: Optional[List[str]] = typer.Argument(None, help="Candidate lines to parse"),
    file: Optional[typer.FileText] = typer.Option(None, "--file", "-f", help="Read one candidate per line ('-' for stdin)"),
    fmt: Optional[str] = typer.Option(None, "--format", help="Output format: table or json"),
    fail_fast: Optional[bool] = typer.Option(None, "--fail-fast/--keep-going", help="Stop at the first bad line"),
):
    s = ctx.obj
    fmt = (fmt or s.output_format).lower()
    if fmt not in FORMATS:
        err_console.print(f"[red]Unknown format {escape(fmt)}; expected one of {', '.join(FORMATS)}[/red]")
        raise typer.Exit(2)
    stop_early = s.fail_fast if fail_fast is None else fail_fast

    inputs = [(f"arg {n}", line) for n, line in enumerate(lines or [], start=1)]
    if file is not None:
        inputs += [(f"{file.name}:{n}", line) for n, line in iter_candidate_lines(file)]
    if not inputs:
        err_console.print("[yellow]No candidate lines given[/yellow]")
        raise typer.Exit(2)

    logger.debug("Parsing %d candidate line(s) as %s", len(inputs), fmt)
    failed = 0
    for where, line in inputs:
        try:
            c = parse(line)
        except CandidateParseError as e:
            failed += 1
            err_console.print(f"[red]{escape(where)}: {e.kind}: {escape(str(e))}[/red]")
            logger.warning("Rejected %s (%s): %s", where, e.kind, e)
            if stop_early:
                break
            continue

        logger.debug("Parsed %s foundation=%s type=%s", where, c.foundation, c.candidate_type)
        if fmt == "json":
            typer.echo(json.dumps(c.to_public()))
        else:
            console.print(_candidate_table(c, where))

    if failed:
        logger.info("%d of %d line(s) failed", failed, len(inputs))
        raise typer.Exit(1)

def main():
    app()

if __name__ == "__main__":
    main()
