"""Tests for the JSON document store and its transactions."""

import json

import pytest

from leathershop.domain.exceptions import EntityNotFoundError, TransientStoreError
from leathershop.infrastructure.persistence.json_document_store import JsonDocumentStore


@pytest.fixture
def store(tmp_path):
    return JsonDocumentStore(tmp_path / "data", max_attempts=3)


class TestPlainOperations:

    def test_set_get_and_find(self, store):
        store.set("stocks", "S1", {"product_id": "P1", "active": True})
        store.set("stocks", "S2", {"product_id": "P2", "active": False})
        assert store.get("stocks", "S1") == {"product_id": "P1", "active": True}
        assert store.get("stocks", "missing") is None
        assert [d["product_id"] for d in store.find("stocks", active=True)] == ["P1"]
        assert len(store.all("stocks")) == 2

    def test_documents_land_in_one_file_per_collection(self, store, tmp_path):
        store.set("productos", "PROD-1000", {"name": "Wallet"})
        raw = json.loads((tmp_path / "data" / "productos.json").read_text())
        assert raw["PROD-1000"]["name"] == "Wallet"
        assert raw["PROD-1000"]["_rev"] == 1

    def test_revision_is_hidden_from_readers(self, store):
        store.set("c", "d", {"x": 1})
        store.set("c", "d", {"x": 2})
        assert store.get("c", "d") == {"x": 2}

    def test_missing_collection_is_empty(self, store):
        assert store.find("nothing") == []


class TestTransactions:

    def test_commit_applies_writes(self, store):
        def bump(tx):
            doc = tx.get("counters", "productos")
            value = 1000 if doc is None else doc["sequence"] + 1
            tx.set("counters", "productos", {"sequence": value})
            return value

        assert store.run_transaction(bump) == 1000
        assert store.run_transaction(bump) == 1001
        assert store.get("counters", "productos") == {"sequence": 1001}

    def test_exception_aborts_without_writes(self, store):
        def boom(tx):
            tx.set("counters", "x", {"sequence": 1})
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            store.run_transaction(boom)
        assert store.get("counters", "x") is None

    def test_reads_see_own_writes(self, store):
        def fn(tx):
            tx.set("c", "d", {"v": 1})
            return tx.get("c", "d")

        assert store.run_transaction(fn) == {"v": 1}

    def test_conflicting_write_triggers_retry(self, store):
        store.set("counters", "c", {"sequence": 1})
        attempts = []

        def fn(tx):
            doc = tx.get("counters", "c")
            if not attempts:
                store.set("counters", "c", {"sequence": 50})
            attempts.append(doc["sequence"])
            tx.set("counters", "c", {"sequence": doc["sequence"] + 1})

        store.run_transaction(fn)
        assert attempts == [1, 50]
        assert store.get("counters", "c") == {"sequence": 51}

    def test_persistent_conflict_gives_up(self, store):
        store.set("counters", "c", {"sequence": 1})

        def fn(tx):
            doc = tx.get("counters", "c")
            store.set("counters", "c", {"sequence": doc["sequence"] + 100})
            tx.set("counters", "c", {"sequence": doc["sequence"] + 1})

        with pytest.raises(TransientStoreError) as info:
            store.run_transaction(fn)
        assert info.value.context["attempts"] == 3

    def test_conflict_on_found_documents(self, store):
        store.set("stocks", "S1", {"product_id": "P1", "quantity": 5})
        calls = []

        def fn(tx):
            (doc,) = tx.find("stocks", product_id="P1")
            if not calls:
                store.set("stocks", "S1", {"product_id": "P1", "quantity": 1})
            calls.append(doc["quantity"])
            tx.set("stocks", "S1", {**doc, "quantity": doc["quantity"] - 1})

        store.run_transaction(fn)
        assert calls == [5, 1]
        assert store.get("stocks", "S1")["quantity"] == 0


class TestBatches:

    def test_update_merges_fields(self, store):
        store.set("precios", "A", {"amount": "10", "current": True})
        store.set("precios", "B", {"amount": "12", "current": True})
        batch = store.batch()
        batch.update("precios", "A", {"current": False})
        batch.update("precios", "B", {"current": False})
        assert batch.commit() == 2
        assert store.get("precios", "A") == {"amount": "10", "current": False}
        assert store.get("precios", "B")["current"] is False

    def test_empty_batch(self, store):
        assert store.batch().commit() == 0

    def test_missing_document_fails_whole_batch(self, store):
        store.set("precios", "A", {"current": True})
        batch = store.batch()
        batch.update("precios", "A", {"current": False})
        batch.update("precios", "ZZ", {"current": False})
        with pytest.raises(EntityNotFoundError):
            batch.commit()
        assert store.get("precios", "A") == {"current": True}
