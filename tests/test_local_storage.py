import json

from albumshop.constants import CART_STORAGE_KEY
from albumshop.db.local_storage import LocalStorage
from albumshop.services.cart import CartStore


def test_missing_file_reads_none(tmp_path):
    storage = LocalStorage(tmp_path / "nope.json")
    assert storage.get_item("album-cart") is None


def test_set_get_and_survives_new_instance(tmp_path):
    path = tmp_path / "nested" / "ls.json"
    LocalStorage(path).set_item("k", "v")
    assert path.exists()
    assert LocalStorage(path).get_item("k") == "v"
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}


def test_remove_and_clear(tmp_path):
    storage = LocalStorage(tmp_path / "ls.json")
    storage.set_item("a", "1")
    storage.set_item("b", "2")
    storage.remove_item("a")
    assert storage.get_item("a") is None
    assert storage.get_item("b") == "2"
    storage.clear()
    assert storage.get_item("b") is None


def test_corrupted_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "ls.json"
    path.write_text("{{{ not json", encoding="utf-8")
    storage = LocalStorage(path)
    assert storage.get_item("k") is None
    storage.set_item("k", "v")
    assert storage.get_item("k") == "v"


def test_non_object_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "ls.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert LocalStorage(path).get_item("0") is None


def test_cart_persists_across_processes(tmp_path, album1, album2):
    path = tmp_path / "ls.json"
    first = CartStore(LocalStorage(path))
    first.add_to_cart(album1)
    first.add_to_cart(album2)

    # a fresh viewer process reading the same file
    second = CartStore(LocalStorage(path))
    second.load_cart()
    assert second.items == [album1, album2]


def test_cart_recovers_from_hand_edited_value(tmp_path):
    path = tmp_path / "ls.json"
    LocalStorage(path).set_item(CART_STORAGE_KEY, "oops")
    cart = CartStore(LocalStorage(path))
    cart.load_cart()
    assert cart.items == []
