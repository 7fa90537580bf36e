import pytest

from hdrscan.vec import (
    Bitflag,
    FrameIndex,
    Range,
    RingBuffer,
    extend_to_index,
    remove_at,
)


def test_range_holds_bounds():
    r = Range(3, 9)
    assert (r.min, r.max) == (3, 9)
    assert r == Range(min=3, max=9)


def test_frame_index_defaults_to_not_swap():
    frame = FrameIndex(2)
    assert frame.frame_index == 2
    assert frame.is_swap is False
    assert FrameIndex(2, True).is_swap is True


def test_ring_buffer_fills_in_order():
    ring = RingBuffer(3)
    for value in ("a", "b", "c"):
        ring.add(value)
    assert ring.items() == ["a", "b", "c"]
    assert ring.position == 3
    assert len(ring) == 3


def test_ring_buffer_wraps_and_overwrites():
    ring = RingBuffer(3)
    for value in ("a", "b", "c", "d", "e"):
        ring.add(value)
    assert ring.items() == ["d", "e", "c"]
    assert ring.position == 2
    assert len(ring) == 3


def test_ring_buffer_never_exceeds_capacity():
    ring = RingBuffer(4)
    for value in range(25):
        ring.add(value)
        assert len(ring) <= ring.capacity


def test_ring_buffer_rejects_zero_capacity():
    with pytest.raises(ValueError):
        RingBuffer(0)


def test_extend_to_index_grows_with_fill():
    items = ["x"]
    extend_to_index(items, 3, None)
    assert items == ["x", None, None, None]


def test_extend_to_index_keeps_longer_list():
    items = [1, 2, 3]
    extend_to_index(items, 1, 0)
    assert items == [1, 2, 3]


def test_extend_to_index_rejects_negative():
    with pytest.raises(ValueError):
        extend_to_index([], -1, 0)


def test_remove_at_shifts_elements():
    items = ["a", "b", "c", "d"]
    removed = remove_at(items, 1)
    assert removed == "b"
    assert items == ["a", "c", "d"]


def test_remove_at_empty_raises():
    with pytest.raises(IndexError):
        remove_at([], 0)


def test_remove_at_out_of_range_raises():
    with pytest.raises(IndexError):
        remove_at([1, 2], 2)


@pytest.mark.parametrize("bit", [0, 1, 63, 64, 130])
def test_bitflag_set_and_clear_round_trip(bit):
    flags = Bitflag()
    assert flags.is_set(bit) is False
    flags.set(bit)
    assert flags.is_set(bit) is True
    flags.clear(bit)
    assert flags.is_set(bit) is False


def test_bitflag_bits_are_independent():
    flags = Bitflag()
    flags.set(5)
    flags.set(70)
    assert flags.is_set(5) and flags.is_set(70)
    assert not flags.is_set(6)
    assert not flags.is_set(69)
    assert len(flags.words) == 2


def test_bitflag_clear_unknown_bit_does_not_grow():
    flags = Bitflag()
    flags.clear(500)
    assert flags.words == []


def test_bitflag_rejects_negative_bit():
    with pytest.raises(ValueError):
        Bitflag().set(-1)