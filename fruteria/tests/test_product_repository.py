# -*- coding: utf-8 -*-
"""
Tests del catálogo de productos
"""
import dataclasses
import threading

import pytest

from fruteria.models import Categoria, Product
from fruteria.repositories import ProductRepository


def test_add_appends_one_with_unique_id(product_repo, catalog):
    before = product_repo.get_all()

    stored = product_repo.add(Product(nombre='Pera', categoria=Categoria.FRUTA, precio=1.10))

    after = product_repo.get_all()
    assert len(after) == len(before) + 1
    assert stored.id == '6'
    assert stored.id not in {p.id for p in before}
    assert after[-1] == stored


def test_list_keeps_insertion_order(catalog):
    assert [p.nombre for p in catalog] == ['Manzana', 'Lechuga', 'Plátano', 'Tomate', 'Naranja']
    assert [p.id for p in catalog] == ['1', '2', '3', '4', '5']


def test_update_replaces_whole_record(product_repo, catalog):
    edited = dataclasses.replace(catalog[0], nombre='Manzana verde', precio=1.80)

    assert product_repo.update(edited) is True
    assert product_repo.get_by_id('1') == edited


def test_update_missing_is_silent(product_repo, catalog):
    assert product_repo.update(Product(nombre='Kiwi', precio=3.0, id='42')) is False
    assert product_repo.get_all() == catalog


def test_delete_and_delete_again(product_repo, catalog):
    assert product_repo.delete('2') is True
    assert product_repo.delete('2') is False
    assert [p.id for p in product_repo.get_all()] == ['1', '3', '4', '5']


def test_get_by_categoria(product_repo, catalog):
    verduras = product_repo.get_by_categoria(Categoria.VERDURA)
    assert [p.nombre for p in verduras] == ['Lechuga', 'Tomate']


def test_mutating_a_copy_does_not_touch_the_store(product_repo, catalog):
    product = product_repo.get_by_id('1')
    product.precio = 0.0

    assert product_repo.get_by_id('1').precio == 1.50


def test_invalid_id_scheme():
    with pytest.raises(ValueError):
        ProductRepository('uuid')


def test_concurrent_adds_get_distinct_ids():
    repo = ProductRepository()

    def worker():
        for _ in range(50):
            repo.add(Product(nombre='Papa', categoria=Categoria.VERDURA, precio=0.5))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [p.id for p in repo.get_all()]
    assert repo.count() == 400
    assert len(set(ids)) == 400


def test_clear_resets_ids(product_repo, catalog):
    product_repo.clear()

    assert product_repo.count() == 0
    assert product_repo.add(Product(nombre='Uva', precio=2.0)).id == '1'
