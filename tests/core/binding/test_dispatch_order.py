# tests/core/binding/test_dispatch_order.py
"""
Testes da ordem de decisão do dispatcher.

A ordem (escalar com valor → mapa → sequência → escalar sem valor →
composto) é uma política documentada. Estes testes fixam a precedência
do valor escalar quando um nó possui valor *e* filhos.
"""

from typing import Dict, List

import pytest

from immutable_config import ConfigSection, ConversionError, MissingRequiredValueError, bind
from immutable_config.core.binding import Binder, DescriptorRegistry, ScalarConverter
from tests.fixtures.models import Point


def _node_with_value_and_children():
    return ConfigSection(
        "",
        value="7",
        children=[
            ConfigSection("x", value="1", path="x"),
            ConfigSection("y", value="2", path="y"),
        ],
        path="",
    )


def test_scalar_value_wins_over_children_for_scalar_targets():
    assert bind(int, _node_with_value_and_children()) == 7


def test_children_are_used_for_collection_targets():
    """
    Para tipos de coleção o valor do nó é ignorado: a forma é decidida pelo tipo.
    """
    node = _node_with_value_and_children()
    assert bind(List[int], node) == (1, 2)
    assert dict(bind(Dict[str, int], node)) == {"x": 1, "y": 2}


def test_children_are_used_for_composite_targets():
    assert bind(Point, _node_with_value_and_children()) == Point(1, 2)


def test_scalar_conversion_failure_is_fatal_even_with_children():
    """
    Falha de conversão no passo escalar é fatal mesmo que os filhos fossem utilizáveis.
    """
    node = ConfigSection("", value="seven", children=[ConfigSection("x", value="1", path="x")], path="")
    with pytest.raises(ConversionError):
        bind(int, node)


def test_registered_scalar_converter_takes_precedence_over_composite():
    """
    Um tipo com conversor escalar é convertido quando o nó tem valor, e só é
    construído a partir dos filhos quando seu construtor foi registrado.
    """
    converter = ScalarConverter()
    converter.register(Point, lambda raw: Point(*map(int, raw.split(","))))

    scalar_only = Binder(DescriptorRegistry(converter))
    assert scalar_only.bind(Point, ConfigSection(value="3,4")) == Point(3, 4)
    with pytest.raises(MissingRequiredValueError):
        scalar_only.bind(Point, ConfigSection.from_mapping({"x": "5"}))

    registry = DescriptorRegistry(converter)
    registry.register(Point)
    both = Binder(registry)
    assert both.bind(Point, ConfigSection(value="3,4")) == Point(3, 4)
    assert both.bind(Point, ConfigSection.from_mapping({"x": "5"})) == Point(5, 0)
