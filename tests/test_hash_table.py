import pytest

from booktables.hash_table import CollisionType, HashMap, HashSet, HashTable

KEYS = ["apple", "Banana", "cherry", "date", "Elder"]


def test_collision_type_from_string():
    assert CollisionType("Chain") is CollisionType.CHAIN
    assert CollisionType("Double") is CollisionType.DOUBLE


def test_unknown_collision_type_raises():
    with pytest.raises(ValueError):
        HashMap("Quadratic", [3, 7])


def test_empty_params_raise():
    with pytest.raises(ValueError):
        HashMap("Chain", [])


def test_double_needs_three_params():
    with pytest.raises(ValueError):
        HashMap("Double", [3, 7])


def test_get_slot_within_range_and_stable():
    table = HashMap("Linear", [31, 13])
    for key in KEYS:
        slot = table.get_slot(key, 31)
        assert 0 <= slot < 13
        assert slot == table.get_slot(key, 31)


def test_get_slot_first_letter():
    table = HashMap("Linear", [31, 101])
    assert table.get_slot("a", 31) == 0
    assert table.get_slot("A", 31) == 26


@pytest.mark.parametrize("kind", ["Chain", "Linear"])
def test_map_round_trip(kind):
    table = HashMap(kind, [31, 11])
    for index, key in enumerate(KEYS):
        table.insert(key, str(index))
    for index, key in enumerate(KEYS):
        assert table.find(key) == str(index)
    assert table.find("missing") is None
    assert len(table) == len(KEYS)


def test_double_round_trip():
    table = HashMap("Double", [31, 37, 7, 11])
    for index, key in enumerate(KEYS):
        table.insert(key, str(index))
    for index, key in enumerate(KEYS):
        assert table.find(key) == str(index)
    assert table.find("missing") is None


@pytest.mark.parametrize("kind", ["Chain", "Linear"])
def test_duplicate_key_keeps_first_value(kind):
    table = HashMap(kind, [31, 11])
    table.insert("key", "first")
    table.insert("key", "second")
    assert table.find("key") == "first"
    assert table.count == 1


def test_linear_full_table_drops_insert():
    table = HashMap("Linear", [31, 2])
    table.insert("a", "1")
    table.insert("c", "2")
    table.insert("b", "3")
    assert table.count == 2
    assert table.find("b") is None
    assert table.table_string() == "(a:1) | (c:2) | "


def test_chain_bucket_rendering():
    table = HashMap("Chain", [31, 2])
    table.insert("a", "x")
    table.insert("c", "y")
    assert table.table_string() == "(a:x) (c:y) | <EMPTY> | "


def test_empty_table_rendering_and_print(capsys):
    table = HashSet("Linear", [31, 3])
    assert table.table_string() == "<EMPTY> | <EMPTY> | <EMPTY> | "
    table.print_table()
    assert capsys.readouterr().out == "<EMPTY> | <EMPTY> | <EMPTY> | \n"


def test_load_tracks_count():
    table = HashSet("Chain", [31, 10])
    for key in KEYS[:4]:
        table.insert(key)
    assert table.load() == pytest.approx(len(table) / table.size)
    assert len(table) == 4


def test_set_membership():
    table = HashSet("Double", [31, 37, 7, 11])
    for key in KEYS:
        table.insert(key)
    assert all(table.find(key) for key in KEYS)
    assert table.find("zebra") is False


def test_base_table_insert_tuple():
    table = HashTable("Linear", [31, 7])
    table.insert(("word", "meaning"))
    assert table.find("word") == "meaning"
    assert table.collision_type is CollisionType.LINEAR