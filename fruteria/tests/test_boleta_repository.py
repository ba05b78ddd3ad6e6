# -*- coding: utf-8 -*-
"""
Tests del almacén de boletas y del cálculo del total
"""
import dataclasses
import logging

import pytest

from fruteria.models import Categoria, OrderLine, Product, Unidad
from fruteria.repositories import BoletaRepository, calculate_total


def test_calculate_total_empty():
    assert calculate_total([]) == 0.00


def test_calculate_total_rounds_to_cents():
    lines = [
        OrderLine('1', 'Manzana', Categoria.FRUTA, 1.50, 2, Unidad.KG),
        OrderLine('2', 'Lechuga', Categoria.VERDURA, 0.99, 3, Unidad.UNIDAD),
    ]
    assert calculate_total(lines) == 5.97
    assert BoletaRepository.calculate_total(lines) == 5.97


def test_calculate_total_accepts_plain_dicts():
    lines = [{'precio': 1.50, 'cantidad': 2}, {'precio': 0.99, 'cantidad': 3}]
    assert calculate_total(lines) == 5.97


def test_add_generates_padded_ids_and_total(boleta_repo, boleta_factory):
    first = boleta_repo.add(boleta_factory())
    second = boleta_repo.add(boleta_factory(cliente='Cliente B'))

    assert first.id == 'B001'
    assert second.id == 'B002'
    assert first.total == 5.97
    assert [b.id for b in boleta_repo.get_all()] == ['B001', 'B002']


def test_add_ignores_client_id_and_total(boleta_repo, boleta_factory):
    candidate = dataclasses.replace(boleta_factory(), id='X-99', total=1000.0)

    stored = boleta_repo.add(candidate)

    assert stored.id == 'B001'
    assert stored.total == 5.97
    assert boleta_repo.get_by_id('X-99') is None


def test_round_trip_keeps_every_field(boleta_repo, boleta_factory):
    candidate = boleta_factory()

    stored = boleta_repo.add(candidate)
    fetched = boleta_repo.get_by_id(stored.id)

    assert fetched.total == calculate_total(candidate.pedido)
    assert dataclasses.replace(fetched, id='', total=0.0) == candidate


def test_update_recomputes_total(boleta_repo, boleta_factory):
    stored = boleta_repo.add(boleta_factory())
    stored.pedido = stored.pedido[:1]
    stored.total = 0.01

    assert boleta_repo.update(stored) is True
    assert boleta_repo.get_by_id(stored.id).total == 3.00


def test_update_unknown_id_leaves_store_unchanged(boleta_repo, boleta_factory):
    boleta_repo.add(boleta_factory())
    before = boleta_repo.get_all()

    ghost = dataclasses.replace(boleta_factory(cliente='Nadie'), id='B999')
    assert boleta_repo.update(ghost) is False

    assert boleta_repo.get_all() == before


def test_delete_then_lookup_is_absent(boleta_repo, boleta_factory):
    stored = boleta_repo.add(boleta_factory())

    assert boleta_repo.delete(stored.id) is True
    assert boleta_repo.get_by_id(stored.id) is None


def test_delete_twice_is_noop(boleta_repo, boleta_factory):
    boleta_repo.add(boleta_factory())
    keep = boleta_repo.add(boleta_factory(cliente='Cliente B'))

    boleta_repo.delete('B001')
    after_first = boleta_repo.get_all()
    assert boleta_repo.delete('B001') is False

    assert boleta_repo.get_all() == after_first
    assert [b.id for b in after_first] == [keep.id]


def test_returned_records_are_copies(boleta_repo, boleta_factory):
    stored = boleta_repo.add(boleta_factory())
    stored.pedido[0].cantidad = 99
    stored.cliente = 'Otro'

    fetched = boleta_repo.get_by_id('B001')
    assert fetched.pedido[0].cantidad == 2
    assert fetched.cliente == 'Cliente A'


def test_rejects_other_entities(boleta_repo):
    with pytest.raises(TypeError):
        boleta_repo.add(Product(nombre='Manzana', precio=1.5))


def test_positional_ids_can_collide_after_delete(boleta_repo, boleta_factory, caplog):
    boleta_repo.add(boleta_factory())
    boleta_repo.add(boleta_factory())
    boleta_repo.delete('B001')

    with caplog.at_level(logging.WARNING, logger='fruteria.repositories.base'):
        reused = boleta_repo.add(boleta_factory())

    assert reused.id == 'B002'
    assert 'B002 ya existe' in caplog.text


@pytest.fixture
def repeated_id_store(boleta_repo, boleta_factory):
    """Dos boletas con ID B002 (el esquema posicional reutiliza el ID)."""
    boleta_repo.add(boleta_factory())
    boleta_repo.add(boleta_factory(cliente='Original'))
    boleta_repo.delete('B001')
    boleta_repo.add(boleta_factory(cliente='Dup'))
    assert [b.id for b in boleta_repo.get_all()] == ['B002', 'B002']
    return boleta_repo


def test_delete_removes_every_record_with_repeated_id(repeated_id_store):
    assert repeated_id_store.delete('B002') is True

    assert repeated_id_store.get_by_id('B002') is None
    assert repeated_id_store.count() == 0


def test_update_replaces_every_record_with_repeated_id(repeated_id_store, boleta_factory):
    assert repeated_id_store.get_by_id('B002').cliente == 'Original'

    edited = dataclasses.replace(boleta_factory(cliente='Nuevo'), id='B002')
    assert repeated_id_store.update(edited) is True

    assert [b.cliente for b in repeated_id_store.get_all()] == ['Nuevo', 'Nuevo']
    assert all(b.total == 5.97 for b in repeated_id_store.get_all())


def test_sequential_ids_never_repeat(boleta_factory):
    repo = BoletaRepository(BoletaRepository.ID_SCHEME_SEQUENTIAL)
    repo.add(boleta_factory())
    repo.add(boleta_factory())
    repo.delete('B002')

    assert repo.add(boleta_factory()).id == 'B003'
