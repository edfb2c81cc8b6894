from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import typer

from easydb_client import EasyDB, EasyDBError
from easydb_client.config_types import save_config_file

from . import console

log = logging.getLogger(__name__)


@dataclass
class Session:
    edb: EasyDB
    config_path: str


@dataclass(frozen=True)
class Command:
    name: str
    help: str
    run: Callable[[Session], None]


def ask(label: str) -> str:
    """Read one line from the user. EOF raises typer.Abort."""
    return typer.prompt(label, default="", show_default=False, prompt_suffix=": ").strip()


def _get(s: Session) -> None:
    console.plain(s.edb.get(ask("Key")))


def _put(s: Session) -> None:
    key = ask("Key")
    value = ask("Value")
    console.plain(f"Code: {s.edb.put(key, value)}")


def _delete(s: Session) -> None:
    console.plain(f"Code: {s.edb.delete(ask('Key'))}")


def _list(s: Session) -> None:
    for key, value in s.edb.list().items():
        console.plain(f"{key}: {value}")


def _clear(s: Session) -> None:
    s.edb.clear()
    console.plain("Success")


def _save(s: Session) -> None:
    path = save_config_file(s.edb.config, s.config_path)
    console.ok(f"Config written: {path}")


def _help(_: Session) -> None:
    print_commands()


COMMANDS: dict[str, Command] = {
    c.name: c
    for c in (
        Command("get", "Get a value by key", _get),
        Command("put", "Set a key to a value", _put),
        Command("del", "Delete an item by key", _delete),
        Command("list", "List all items in DB", _list),
        Command("clear", "Delete all items", _clear),
        Command("uuid", "Get UUID", lambda s: console.plain(s.edb.database_id)),
        Command("token", "Get token", lambda s: console.plain(s.edb.token)),
        Command("url", "Get URL", lambda s: console.plain(s.edb.url)),
        Command("save", "Write credentials to the config file", _save),
        Command("help", "Show this list", _help),
    )
}


def print_commands() -> None:
    console.plain("    Commands:")
    for c in COMMANDS.values():
        console.plain(f"    {c.name:<8} {c.help}")
    console.plain(f"    {'exit':<8} Exit the program")


def run_prompt(edb: EasyDB, *, config_path: str) -> None:
    session = Session(edb=edb, config_path=config_path)
    console.plain("EasyDB interactive prompt")
    console.plain("-" * 35)
    print_commands()
    console.plain("")

    while True:
        try:
            line = typer.prompt("", default="", show_default=False, prompt_suffix="> ").strip()
        except typer.Abort:
            break
        if line == "exit":
            break
        command = COMMANDS.get(line)
        if command is None:
            console.plain("Invalid command.")
            continue
        try:
            command.run(session)
        except typer.Abort:
            break
        except EasyDBError as e:
            log.debug("command %s failed", line, exc_info=True)
            console.err(str(e))
        except OSError as e:
            # only `save` touches the filesystem
            console.err(f"Cannot write {config_path}: {e}")
