from __future__ import annotations

import pytest

from entangle.core import (
    AlreadyMeasured,
    CallableBitSource,
    EntangledPair,
    ErrorKind,
    PairNotFound,
    PairRegistry,
    PairState,
)


def test_create_assigns_sequential_ids_and_indexes_owner() -> None:
    reg = PairRegistry()

    ids = [reg.create("user1"), reg.create("user2"), reg.create("user1"), reg.create("user3")]

    assert ids == [0, 1, 2, 3]
    assert len(reg) == 4
    assert reg.list_by_owner("user1") == [0, 2]
    assert reg.list_by_owner("user2") == [1]
    assert reg.list_by_owner("user3") == [3]
    assert reg.list_by_owner("nobody") == []


def test_new_pair_is_unmeasured() -> None:
    reg = PairRegistry()
    pair_id = reg.create("user1")

    pair = reg.get(pair_id)
    assert pair == EntangledPair(id=0, creator="user1")
    assert pair.particle1 is None
    assert pair.particle2 is None
    assert pair.measured is False
    assert pair.state is PairState.UNMEASURED
    assert reg.verify(pair_id) is False


def test_measure_sets_complementary_particles() -> None:
    reg = PairRegistry()
    pair_id = reg.create("user1")

    value = reg.measure(pair_id)

    assert value in (0, 1)
    pair = reg.get(pair_id)
    assert pair.measured is True
    assert pair.state is PairState.MEASURED
    assert pair.particle1 == value
    assert pair.particle2 == 1 - value
    assert pair.particle1 != pair.particle2
    assert reg.verify(pair_id) is True


def test_second_measure_fails_and_leaves_pair_unchanged() -> None:
    reg = PairRegistry()
    pair_id = reg.create("user1")
    reg.measure(pair_id)
    before = reg.get(pair_id)

    with pytest.raises(AlreadyMeasured) as info:
        reg.measure(pair_id)

    assert info.value.kind is ErrorKind.ALREADY_MEASURED
    assert info.value.pair_id == pair_id
    assert "ERR-ALREADY-MEASURED" in str(info.value)
    assert reg.get(pair_id) == before


@pytest.mark.parametrize("op", ["measure", "get", "verify"])
def test_unknown_pair_raises_not_found(op: str) -> None:
    reg = PairRegistry()

    with pytest.raises(PairNotFound) as info:
        getattr(reg, op)(999)

    assert info.value.kind is ErrorKind.PAIR_NOT_FOUND
    assert info.value.pair_id == 999


def test_snapshot_is_not_affected_by_later_measurement() -> None:
    reg = PairRegistry()
    pair_id = reg.create("user1")
    before = reg.get(pair_id)

    reg.measure(pair_id)

    assert before.measured is False
    assert before.particle1 is None
    assert reg.get(pair_id).measured is True


def test_list_by_owner_returns_a_copy() -> None:
    reg = PairRegistry()
    reg.create("user1")

    ids = reg.list_by_owner("user1")
    ids.append(42)

    assert reg.list_by_owner("user1") == [0]


def test_empty_creator_is_rejected_without_consuming_an_id() -> None:
    reg = PairRegistry()

    with pytest.raises(ValueError):
        reg.create("  ")

    assert reg.create("user1") == 0


def test_invalid_bit_source_value_leaves_pair_unmeasured() -> None:
    reg = PairRegistry(CallableBitSource(lambda: 7))
    pair_id = reg.create("user1")

    with pytest.raises(ValueError):
        reg.measure(pair_id)

    assert reg.get(pair_id).measured is False
    assert reg.verify(pair_id) is False


def test_injected_bit_source_controls_measurement() -> None:
    bits = iter([1, 0])
    reg = PairRegistry(CallableBitSource(lambda: next(bits)))
    a = reg.create("user1")
    b = reg.create("user1")

    assert reg.measure(a) == 1
    assert reg.measure(b) == 0
    assert (reg.get(a).particle1, reg.get(a).particle2) == (1, 0)
    assert (reg.get(b).particle1, reg.get(b).particle2) == (0, 1)


def test_revision_bumps_on_mutations_only() -> None:
    reg = PairRegistry()
    assert reg.revision() == 0

    pair_id = reg.create("user1")
    assert reg.revision() == 1

    reg.get(pair_id)
    reg.verify(pair_id)
    reg.list_by_owner("user1")
    assert reg.revision() == 1

    reg.measure(pair_id)
    assert reg.revision() == 2

    with pytest.raises(AlreadyMeasured):
        reg.measure(pair_id)
    assert reg.revision() == 2


def test_reset_restarts_ids_and_clears_owners() -> None:
    reg = PairRegistry()
    reg.create("user1")
    reg.create("user2")

    reg.reset()

    assert len(reg) == 0
    assert reg.owners() == []
    assert reg.list_by_owner("user1") == []
    assert reg.create("user2") == 0
    with pytest.raises(PairNotFound):
        reg.get(1)


def test_user1_walkthrough() -> None:
    reg = PairRegistry()

    assert reg.create("user1") == 0
    assert reg.list_by_owner("user1") == [0]
    assert reg.create("user1") == 1
    assert reg.list_by_owner("user1") == [0, 1]

    b = reg.measure(0)
    assert b in (0, 1)
    pair = reg.get(0)
    assert pair.particle1 == b
    assert pair.particle2 == 1 - b
    assert pair.measured is True
    assert reg.verify(0) is True

    with pytest.raises(AlreadyMeasured):
        reg.measure(0)
    assert reg.verify(1) is False
    with pytest.raises(PairNotFound):
        reg.get(42)


def test_owner_identities_are_stored_exactly_as_given() -> None:
    reg = PairRegistry()
    a = reg.create("user1 ")
    b = reg.create("user1")
    c = reg.create(" user1")

    assert reg.get(a).creator == "user1 "
    assert reg.get(c).creator == " user1"
    assert reg.list_by_owner("user1 ") == [a]
    assert reg.list_by_owner("user1") == [b]
    assert reg.list_by_owner(" user1") == [c]
    assert sorted(reg.owners()) == sorted(["user1 ", "user1", " user1"])


@pytest.mark.parametrize("creator", [None, 5, b"user1", ["user1"]])
def test_non_string_creator_is_rejected(creator: object) -> None:
    reg = PairRegistry()

    with pytest.raises(TypeError):
        reg.create(creator)  # type: ignore[arg-type]

    assert len(reg) == 0
    assert reg.list_by_owner("None") == []


@pytest.mark.parametrize("op", ["measure", "get", "verify"])
@pytest.mark.parametrize("bad_id", [0.9, 0.0, True, False, "0", None])
def test_non_integer_pair_ids_are_rejected(op: str, bad_id: object) -> None:
    reg = PairRegistry()
    reg.create("user1")
    reg.create("user1")

    with pytest.raises(TypeError):
        getattr(reg, op)(bad_id)

    assert reg.get(0).measured is False
    assert reg.get(1).measured is False


def test_integer_like_pair_ids_are_accepted() -> None:
    import numpy as np

    reg = PairRegistry()
    pair_id = reg.create("user1")

    assert reg.get(np.int64(pair_id)).id == pair_id
    reg.measure(np.int32(pair_id))
    assert reg.verify(np.int64(pair_id)) is True
