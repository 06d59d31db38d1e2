from __future__ import annotations

import sys
from pathlib import Path

import typer
from structlog.typing import FilteringBoundLogger

from .config import AppConfig, ConfigError
from .hash_set import HashSet
from .lines import collect_lines, normalize_line
from .logger import configure_logging, get_logger


app = typer.Typer(help="Distinct lines of text, backed by HashSet")

FileArg = typer.Argument(
    None,
    help="Input file; stdin when omitted or '-'",
    exists=True,
    dir_okay=False,
    readable=True,
    allow_dash=True,
)
ConfigOpt = typer.Option(
    None, "--config", help="YAML config file", exists=True, dir_okay=False, readable=True
)


def _setup(config: Path | None) -> tuple[AppConfig, FilteringBoundLogger]:
    try:
        cfg = AppConfig.from_yaml(config)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    configure_logging(cfg.logging.level, json_output=cfg.logging.json_output)
    log = get_logger("cli")
    log.debug("config.loaded", path=str(config) if config else None, level=cfg.logging.level)
    return cfg, log


def _read_lines(path: Path | None) -> list[str]:
    if path is None or str(path) == "-":
        return sys.stdin.readlines()
    with open(path, encoding="utf-8") as fh:
        return fh.readlines()


def _collect(cfg: AppConfig, log: FilteringBoundLogger, path: Path | None) -> HashSet[str]:
    raw = _read_lines(path)
    values = collect_lines(raw, strip=cfg.lines.strip, skip_blank=cfg.lines.skip_blank)
    log.debug("lines.collected", source=str(path or "-"), read=len(raw), distinct=len(values))
    return values


@app.command()
def dedupe(
    file: Path | None = FileArg,
    sort: bool = typer.Option(False, "--sort", help="Sort the output (also lines.sort in config)"),
    config: Path | None = ConfigOpt,
) -> None:
    """Print each distinct line once."""
    cfg, log = _setup(config)
    values = _collect(cfg, log, file)

    out = values.to_list()
    if sort or cfg.lines.sort:
        out.sort()
    for line in out:
        typer.echo(line)


@app.command()
def count(
    file: Path | None = FileArg,
    config: Path | None = ConfigOpt,
) -> None:
    """Print the number of distinct lines."""
    cfg, log = _setup(config)
    typer.echo(str(_collect(cfg, log, file).len()))


@app.command()
def has(
    value: str,
    file: Path | None = FileArg,
    config: Path | None = ConfigOpt,
) -> None:
    """Exit 0 and print 'yes' when VALUE is among the lines, else exit 1 and print 'no'."""
    cfg, log = _setup(config)
    values = _collect(cfg, log, file)

    needle = normalize_line(value, strip=cfg.lines.strip)
    if values.has(needle):
        typer.echo("yes")
        return
    typer.echo("no")
    raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
