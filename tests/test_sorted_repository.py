import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest

from generic_containers.exceptions import ElementNotFoundError, EmptyCollectionError
from generic_containers.sorted_repository import SortedRepository


def test_add_and_ordering():
    repo = SortedRepository()
    for value in [3, 1, 2]:
        repo.add(value)
    assert repo.get_all() == (1, 2, 3)
    assert repo.find_max() == 3


def test_strings_use_natural_order():
    repo = SortedRepository()
    for value in ["Banana", "Apple", "Cherry"]:
        repo.add(value)
    assert list(repo) == ["Apple", "Banana", "Cherry"]
    assert repo.find_max() == "Cherry"


def test_duplicates_are_kept():
    repo = SortedRepository([5, 2, 5, 1])
    repo.add(2)
    assert repo.get_all() == (1, 2, 2, 5, 5)
    assert len(repo) == 5


def test_sorted_after_every_add():
    repo = SortedRepository()
    for value in [9, -3, 4, 4, 0, 12, 7, -8]:
        repo.add(value)
        snapshot = repo.get_all()
        assert all(a <= b for a, b in zip(snapshot, snapshot[1:]))
        assert repo.find_max() == snapshot[-1]


def test_snapshot_is_immune_to_later_adds():
    repo = SortedRepository([2, 1])
    snapshot = repo.get_all()
    repo.add(0)
    assert snapshot == (1, 2)
    assert isinstance(snapshot, tuple)


def test_find_max_on_empty_repository():
    repo = SortedRepository()
    with pytest.raises(EmptyCollectionError):
        repo.find_max()


def test_remove_existing_and_missing_values():
    repo = SortedRepository([1, 2, 3])
    repo.remove(2)
    assert repo.get_all() == (1, 3)
    with pytest.raises(ElementNotFoundError):
        repo.remove(4)
    with pytest.raises(ValueError):
        repo.remove(2)
