# pokedexcli

An interactive Pokedex for the terminal. It browses location areas and
Pokemon from the public PokeAPI, lets you try to catch Pokemon and keeps the
ones you catch in your Pokedex for the rest of the session.

## Installing

```
pip install .
```

Python 3.10 or newer is required. There are no third-party runtime
dependencies; HTTP requests use the standard library.

## Running

```
pokedexcli
```

You get a `Pokedex > ` prompt. Input is lower-cased and split on whitespace;
the first word is the command and, for `explore`, `catch` and `inspect`, the
second word is its argument. Without that argument the prompt answers
`need more input`; an unrecognised command gets `Unknown Command`.

| Command             | What it does                                             |
|---------------------|----------------------------------------------------------|
| `help`              | Show the help message                                    |
| `exit`              | Say goodbye and leave the Pokedex                        |
| `map`               | Show the next page of location areas                     |
| `mapb`              | Show the previous page of location areas                 |
| `explore <area>`    | List the Pokemon found in a location area                |
| `catch <pokemon>`   | Throw a Pokeball; higher base experience, lower chance   |
| `inspect <pokemon>` | Show name, height, weight, stats and types of a catch    |
| `pokedex`           | List the Pokemon you have caught                         |

The session also ends at end of input (for example Ctrl-D). Calling `mapb`
before any earlier page exists prints `you're on the first page`; failed
requests and unusable responses are reported and the prompt carries on.

The chance of a catch is `(608 - base_experience) / 608`.

An example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
tentacool
...
Pokedex > catch pikachu
Throwing a Pokeball at pikachu...
pikachu was caught!
Pokedex > inspect pikachu
Name: pikachu
Height: ...
Weight: ...
Stats: 
	-hp: ...
...
Pokedex > exit
Closing the Pokedex... Goodbye!
```

Responses from the API are cached in memory by URL; a background thread
drops entries older than five minutes. Paging back and forth with `map` and
`mapb` within that time doesn't repeat requests.

## Using it as a library

The pieces are importable on their own:

- `pokedexcli.cache.Cache(interval)` is a thread-safe in-memory byte cache
  with `add`, `get`, `reap` and `close`; it is also a context manager.
- `pokedexcli.client.Client(timeout, cache_interval, fetch)` fetches pages
  with `list_locations`, `list_pokemons` and `get_pokemon`, caching the raw
  responses. `fetch` may be any callable taking a URL and a timeout and
  returning the body bytes. Failures raise `pokedexcli.client.PokeAPIError`.
- `pokedexcli.models` holds the parsed data types (`NamedResource`,
  `LocationPage`, `LocationArea`, `PokemonStat`, `Pokemon`) and
  `new_pokedex()`.
- `pokedexcli.commands` holds the command functions, `Config`, `Command`,
  `get_commands()` and the catch helpers `catch_probability` and
  `attempt_catch`.
- `pokedexcli.repl.start_repl(config, lines)` runs the command loop over any
  iterable of input lines, which suits scripting and testing;
  `clean_input(text)` is the word splitter it uses.

## What it does not do

The Pokedex lives only in memory: caught Pokemon are not saved when the
session ends, and the cache is not kept on disk.

## Tests

```
pip install ".[test]"
pytest
```