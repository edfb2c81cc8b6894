from __future__ import annotations

import typer

from easydb_client import EasyDB, EasyDBError

from . import console
from .config import resolve_config_path
from .http import INVALID_ARGS_MSG, make_client
from .interactive import run_prompt
from .logging_ import setup_logging


def _wait_for_config(config_path: str) -> EasyDB:
    while True:
        try:
            return make_client([], config_path=config_path)
        except EasyDBError as e:
            console.err(str(e))
            console.warn(f"Make sure `{config_path}` exists, then press enter.")
            typer.prompt("", default="", show_default=False, prompt_suffix="")


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="easydb",
        help="Interactive prompt for an easydb.io database.",
        add_completion=False,
    )

    @app.command()
    def _main(
            args: list[str] | None = typer.Argument(
                None,
                metavar="[UUID TOKEN [URL]]",
                help="Database id and token, optionally followed by the base URL. Omit to read the config file.",
            ),
            config: str | None = typer.Option(
                None,
                "-c",
                "--config",
                help="Config file (default: $EASYDB_CONFIG or ./easydb.toml).",
            ),
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)
        args = list(args or [])
        if len(args) not in (0, 2, 3):
            console.err(INVALID_ARGS_MSG)
            raise typer.Exit(code=1)

        config_path = resolve_config_path(config)
        if args:
            try:
                edb = make_client(args, config_path=config_path)
            except EasyDBError as e:
                console.err(str(e))
                raise typer.Exit(code=1)
        else:
            edb = _wait_for_config(config_path)

        with edb:
            run_prompt(edb, config_path=config_path)

    return app


app = _build_app()
