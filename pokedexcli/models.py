"""Data types for the PokeAPI responses the Pokedex uses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], field: str) -> int:
    value = data.get(field)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {field!r} must be an integer, got {value!r}")
    return value


def _str(data: Mapping[str, Any], field: str) -> str:
    value = data.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {field!r} must be a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], field: str) -> str | None:
    value = data.get(field)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {field!r} must be a string or null, got {value!r}")
    return value


def _list(data: Mapping[str, Any], field: str) -> list[Any]:
    value = data.get(field)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {field!r} must be a list, got {value!r}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name and the URL of the API resource it refers to."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _mapping(data, "named resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        data = _mapping(data, "location page")
        return cls(
            count=_int(data, "count"),
            next=_optional_str(data, "next"),
            previous=_optional_str(data, "previous"),
            results=tuple(NamedResource.from_dict(r) for r in _list(data, "results")),
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area and the Pokemon that can be encountered there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = NamedResource()
    pokemon_encounters: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        data = _mapping(data, "location area")
        encounters = tuple(
            NamedResource.from_dict(_mapping(e, "pokemon encounter").get("pokemon"))
            for e in _list(data, "pokemon_encounters")
        )
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            pokemon_encounters=encounters,
        )

    def pokemon_names(self) -> list[str]:
        """Names of the encounterable Pokemon, in response order."""
        return [pokemon.name for pokemon in self.pokemon_encounters]


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokemon."""

    name: str = ""
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _mapping(data, "stat")
        return cls(
            name=NamedResource.from_dict(data.get("stat")).name,
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass(frozen=True)
class Pokemon:
    """The parts of a Pokemon record the Pokedex uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _mapping(data, "pokemon")
        is_default = data.get("is_default", False)
        if is_default is None:
            is_default = False
        if not isinstance(is_default, bool):
            raise ValueError(f"field 'is_default' must be a boolean, got {is_default!r}")
        types = tuple(
            NamedResource.from_dict(_mapping(t, "type slot").get("type")).name
            for t in _list(data, "types")
        )
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            order=_int(data, "order"),
            is_default=is_default,
            stats=tuple(PokemonStat.from_dict(s) for s in _list(data, "stats")),
            types=types,
        )


def new_pokedex() -> dict[str, Pokemon]:
    """Return an empty Pokedex mapping names to caught Pokemon."""
    return {}