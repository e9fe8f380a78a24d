import logging
from typing import Annotated

import typer

from jsonsideload.cli.resolve import resolve_command, schema_command

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

app = typer.Typer(
    name="jsonsideload",
    help="jsonsideload CLI: map sideloaded JSON documents onto pydantic models.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _validate_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"{value!r} is not one of {', '.join(LOG_LEVELS)}.")
    return level


@app.callback()
def _configure(
    log_level: Annotated[
        str,
        typer.Option(
            envvar="JSONSIDELOAD_LOG_LEVEL",
            callback=_validate_log_level,
            help="Logging level.",
        ),
    ] = "WARNING",
) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("jsonsideload").setLevel(log_level)


app.command("resolve")(resolve_command)
app.command("schema")(schema_command)


def main() -> None:
    app()
