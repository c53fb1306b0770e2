import pytest

from pokedexcli.models import (
    LocationArea,
    LocationPage,
    NamedResource,
    Pokemon,
    PokemonStat,
    new_pokedex,
)

LOCATION_URL = "https://pokeapi.co/api/v2/location-area/"


def test_named_resource_from_dict():
    res = NamedResource.from_dict({"name": "canalave-city-area", "url": LOCATION_URL + "1/"})
    assert res.name == "canalave-city-area"
    assert res.url == LOCATION_URL + "1/"


def test_named_resource_missing_fields_default_empty():
    res = NamedResource.from_dict({})
    assert res == NamedResource()


def test_named_resource_rejects_non_object():
    with pytest.raises(ValueError):
        NamedResource.from_dict(["canalave-city-area"])


def test_location_page_from_dict():
    next_url = LOCATION_URL + "?offset=20&limit=20"
    data = {
        "count": 1089,
        "next": next_url,
        "previous": None,
        "results": [
            {"name": "canalave-city-area", "url": LOCATION_URL + "1/"},
            {"name": "eterna-city-area", "url": LOCATION_URL + "2/"},
        ],
    }
    page = LocationPage.from_dict(data)
    assert page.count == 1089
    assert page.next == next_url
    assert page.previous is None
    assert [r.name for r in page.results] == ["canalave-city-area", "eterna-city-area"]
    assert page.results[1].url == LOCATION_URL + "2/"


def test_location_page_rejects_wrong_count_type():
    with pytest.raises(ValueError):
        LocationPage.from_dict({"count": "many"})


def test_location_page_rejects_non_string_next():
    with pytest.raises(ValueError):
        LocationPage.from_dict({"next": 20})


def test_location_area_pokemon_names():
    data = {
        "id": 1,
        "name": "canalave-city-area",
        "game_index": 1,
        "location": {"name": "canalave-city", "url": "https://pokeapi.co/api/v2/location/1/"},
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": "u1"}, "version_details": []},
            {"pokemon": {"name": "tentacruel", "url": "u2"}, "version_details": []},
            {"pokemon": {"name": "staryu", "url": "u3"}},
        ],
    }
    area = LocationArea.from_dict(data)
    assert area.pokemon_names() == ["tentacool", "tentacruel", "staryu"]
    assert area.location.name == "canalave-city"
    assert area.name == "canalave-city-area"
    assert len(area.pokemon_encounters) == len(data["pokemon_encounters"])


def test_location_area_without_encounters():
    area = LocationArea.from_dict({"name": "empty-area"})
    assert area.pokemon_names() == []


def test_location_area_rejects_non_list_encounters():
    with pytest.raises(ValueError):
        LocationArea.from_dict({"pokemon_encounters": {"pokemon": {"name": "staryu"}}})


def test_pokemon_stat_from_dict():
    stat = PokemonStat.from_dict(
        {"base_stat": 45, "effort": 0, "stat": {"name": "hp", "url": "u"}}
    )
    assert stat.name == "hp"
    assert stat.base_stat == 45
    assert stat.effort == 0


def test_pokemon_from_dict():
    data = {
        "id": 25,
        "name": "pikachu",
        "base_experience": 112,
        "height": 4,
        "weight": 60,
        "order": 35,
        "is_default": True,
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u"}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": "u"}},
        ],
        "types": [{"slot": 1, "type": {"name": "electric", "url": "u"}}],
        "sprites": {"front_default": "x"},
        "abilities": [],
    }
    mon = Pokemon.from_dict(data)
    assert mon.name == "pikachu"
    assert mon.id == 25
    assert mon.base_experience == 112
    assert mon.height == 4
    assert mon.weight == 60
    assert mon.is_default is True
    assert [(s.name, s.base_stat) for s in mon.stats] == [("hp", 35), ("attack", 55)]
    assert mon.types == ("electric",)


def test_pokemon_missing_fields_use_zero_values():
    mon = Pokemon.from_dict({"name": "missingno"})
    assert mon == Pokemon(name="missingno")


def test_pokemon_rejects_bool_as_int():
    with pytest.raises(ValueError):
        Pokemon.from_dict({"height": True})


def test_pokemon_rejects_non_object():
    with pytest.raises(ValueError):
        Pokemon.from_dict("pikachu")


def test_new_pokedex_is_fresh_and_empty():
    first = new_pokedex()
    second = new_pokedex()
    first["pikachu"] = Pokemon(name="pikachu")
    assert second == {}
    assert list(first) == ["pikachu"]