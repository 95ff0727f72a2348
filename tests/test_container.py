"""Tests for the fixed-capacity Container."""

import pytest

from storage import Container, ContainerIsFull, PokemonNotFound
from tests.factories import create_pokemon


class TestContainerPush:

    def test_push_until_full(self):
        c = Container(2)
        c.push(create_pokemon(1))
        assert c.has_space()
        c.push(create_pokemon(2))
        assert not c.has_space()
        assert len(c) == 2

    def test_push_when_full_rejected(self):
        c = Container(1)
        c.push(create_pokemon(1))
        with pytest.raises(ContainerIsFull):
            c.push(create_pokemon(2))
        assert [p.pokeapi_id for p in c.get_pokemon()] == [1]

    def test_zero_capacity_never_accepts(self):
        c = Container(0)
        assert not c.has_space()
        with pytest.raises(ContainerIsFull):
            c.push(create_pokemon(1))

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            Container(-1)

    def test_push_same_id_overwrites(self):
        c = Container(3)
        c.push(create_pokemon(1, name="old"))
        c.push(create_pokemon(1, name="new"))
        assert len(c) == 1
        assert c.get_pokemon()[0].name == "new"


class TestContainerRemove:

    def test_remove_returns_pokemon(self):
        c = Container(2)
        pikachu = create_pokemon(25, name="pikachu")
        c.push(pikachu)
        assert c.remove(25) == pikachu
        assert 25 not in c
        assert c.get_pokemon() == []

    def test_remove_missing_raises(self):
        c = Container(2)
        with pytest.raises(PokemonNotFound) as exc:
            c.remove(99)
        assert exc.value.pokeapi_id == 99

    def test_remove_frees_space(self):
        c = Container(1)
        c.push(create_pokemon(1))
        c.remove(1)
        assert c.has_space()
