"""The Pokedex commands and the table that maps command names to them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Protocol

from pokedexcli.client import Client
from pokedexcli.models import Pokemon, new_pokedex

MAX_BASE_EXPERIENCE = 608
GOODBYE_MESSAGE = "Closing the Pokedex... Goodbye!"


class CommandError(Exception):
    """Raised when a command cannot do what was asked."""


class ExitRequested(Exception):
    """Raised by the exit command to end the session."""

    def __init__(self, code: int = 0, message: str = GOODBYE_MESSAGE) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class _RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass
class Config:
    """State shared by the commands during a session."""

    client: Client
    pokedex: dict[str, Pokemon] = field(default_factory=new_pokedex)
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    rng: _RandomSource = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[[Config, str], None]


def catch_probability(base_exp: int, max_base_exp: int) -> float:
    """Chance of catching a Pokemon with the given base experience."""
    return (max_base_exp - base_exp) / max_base_exp


def attempt_catch(base_exp: int, max_base_exp: int, rng: _RandomSource) -> bool:
    """Roll ``rng`` once and report whether the catch succeeded."""
    return rng.random() < catch_probability(base_exp, max_base_exp)


def command_exit(config: Config, argument: str) -> None:
    """Say goodbye and end the session with exit status 0."""
    request = ExitRequested(0, GOODBYE_MESSAGE)
    print(request.message)
    raise request


def command_help(config: Config, argument: str) -> None:
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def _show_locations(config: Config, page_url: str | None) -> None:
    page = config.client.list_locations(page_url)
    config.next_locations_url = page.next
    config.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_map(config: Config, argument: str) -> None:
    _show_locations(config, config.next_locations_url)


def command_mapb(config: Config, argument: str) -> None:
    if config.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_locations(config, config.prev_locations_url)


def command_explore(config: Config, argument: str) -> None:
    area = config.client.list_pokemons(argument)
    print(f"Exploring {argument}...")
    print("Found Pokemon:")
    for name in area.pokemon_names():
        print(name)


def command_catch(config: Config, argument: str) -> None:
    pokemon = config.client.get_pokemon(argument)
    print(f"Throwing a Pokeball at {argument}...")
    if attempt_catch(pokemon.base_experience, MAX_BASE_EXPERIENCE, config.rng):
        print(f"{argument} was caught!")
        config.pokedex[argument] = pokemon
    else:
        print(f"{argument} escaped!")


def command_inspect(config: Config, argument: str) -> None:
    pokemon = config.pokedex.get(argument)
    if pokemon is None:
        print("you have not caught that pokemon")
        return
    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats: ")
    for stat in pokemon.stats:
        print(f"\t-{stat.name}: {stat.base_stat}")
    print("Types: ")
    for type_name in pokemon.types:
        print(f"\t- {type_name}")


def command_pokedex(config: Config, argument: str) -> None:
    print("Your Pokedex:")
    for name in config.pokedex:
        print(f"\t-{name}")


def get_commands() -> dict[str, Command]:
    """Return every command keyed by name."""
    commands = [
        Command("exit", "Exit the Pokedex", command_exit),
        Command("help", "Show the help message", command_help),
        Command("map", "displays 20 location areas in Pokemon world", command_map),
        Command("mapb", "displays previous 20 locations", command_mapb),
        Command("explore", "list pokemons in the location-area", command_explore),
        Command("catch", "attempt to catch a pokemon", command_catch),
        Command("inspect", "inspects caught pokemon", command_inspect),
        Command("pokedex", "displays list of caught pokemons", command_pokedex),
    ]
    return {command.name: command for command in commands}