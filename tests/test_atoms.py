import pytest

from zdpkit.atoms import MAX_ATOM_SIZE, Atom, AtomError, AtomTable


def test_add_is_idempotent():
    table = AtomTable(8)
    first = table.add("abc")
    second = table.add("abc")
    assert first == second
    assert len(table) == 1


def test_str_and_bytes_share_atom():
    table = AtomTable(8)
    assert table.add("label") == table.add(b"label")
    assert len(table) == 1


def test_get_returns_added_data():
    table = AtomTable(8)
    index = table.add(b"state/on")
    atom = table.get(index)
    assert atom.data == b"state/on"
    assert atom.text == "state/on"
    assert len(atom) == len(b"state/on")


def test_distinct_atoms_get_distinct_indexes():
    table = AtomTable(8)
    indexes = {table.add(name) for name in ("a", "b", "c")}
    assert len(indexes) == 3
    assert len(table) == 3


def test_index_of():
    table = AtomTable(8)
    index = table.add("x")
    assert table.index_of("x") == index
    with pytest.raises(AtomError):
        table.index_of("missing")


def test_table_full():
    table = AtomTable(2)
    table.add("a")
    table.add("b")
    with pytest.raises(AtomError):
        table.add("c")
    assert table.add("a") == table.index_of("a")


def test_size_limits():
    table = AtomTable(4)
    index = table.add(b"x" * MAX_ATOM_SIZE)
    assert len(table.get(index)) == MAX_ATOM_SIZE
    with pytest.raises(AtomError):
        table.add(b"x" * (MAX_ATOM_SIZE + 1))
    with pytest.raises(AtomError):
        table.add(b"")


@pytest.mark.parametrize("index", [-1, 1, 100])
def test_get_out_of_range(index):
    table = AtomTable(4)
    table.add("only")
    with pytest.raises(AtomError):
        table.get(index)


def test_invalid_max_atoms():
    with pytest.raises(ValueError):
        AtomTable(0)


def test_atom_equality():
    assert Atom(b"abc") == Atom(b"abc")
    with pytest.raises(TypeError):
        AtomTable(2).add(42)