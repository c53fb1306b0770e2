"""The interactive Pokedex prompt and its command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

from pokedexcli.client import Client, PokeAPIError
from pokedexcli.commands import CommandError, Config, ExitRequested, get_commands
from pokedexcli.models import new_pokedex

PROMPT = "Pokedex > "
_COMMANDS_WITH_ARGUMENT = frozenset({"explore", "catch", "inspect"})


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def start_repl(config: Config, lines: Iterable[str] | None = None) -> None:
    """Read commands from ``lines`` (standard input by default) until exit or end of input."""
    source = iter(sys.stdin if lines is None else lines)
    commands = get_commands()
    while True:
        print(PROMPT, end="", flush=True)
        line = next(source, None)
        if line is None:
            print()
            return
        words = clean_input(line)
        if not words:
            continue
        name = words[0]
        argument = ""
        if name in _COMMANDS_WITH_ARGUMENT:
            if len(words) < 2:
                print("need more input")
                continue
            argument = words[1]
        command = commands.get(name)
        if command is None:
            print("Unknown Command")
            continue
        try:
            command.callback(config, argument)
        except ExitRequested:
            return
        except (CommandError, PokeAPIError) as exc:
            print(exc)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive Pokedex."""
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="Browse and catch Pokemon from the PokeAPI."
    )
    parser.parse_args(argv)
    with Client(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client, pokedex=new_pokedex()))
    return 0


if __name__ == "__main__":
    sys.exit(main())