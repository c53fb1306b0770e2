[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokedexcli"
version = "0.1.0"
description = "An interactive command-line Pokedex backed by the public PokeAPI"
requires-python = ">=3.10"
dependencies = []
keywords = ["pokedex", "pokemon", "pokeapi", "repl", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokedexcli = "pokedexcli.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["pokedexcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
