import pytest

from bfi.core.errors import InvalidAddress, ResourceAcquisitionFailure
from bfi.core.tape import DEFAULT_TAPE_SIZE, Tape


def test_new_tape_is_zeroed():
    tape = Tape(16)
    assert tape.size == 16
    assert tape.pointer == 0
    assert tape.snapshot() == [0] * 16


def test_default_size():
    assert Tape().size == DEFAULT_TAPE_SIZE == 30720


def test_rejects_empty_tape():
    with pytest.raises(ValueError):
        Tape(0)


def test_increment_wraps_255_to_0():
    tape = Tape(4)
    tape.write(255)
    tape.increment()
    assert tape.read() == 0


def test_decrement_wraps_0_to_255():
    tape = Tape(4)
    tape.decrement()
    assert tape.read() == 255


def test_write_keeps_low_byte():
    tape = Tape(4)
    tape.write(0x141)
    assert tape.read() == 0x41


@pytest.mark.parametrize("size", [1, 2, 7, 30720])
def test_move_right_from_last_cell_wraps_to_zero(size):
    tape = Tape(size)
    tape.pointer = size - 1
    tape.move_right()
    assert tape.pointer == 0


@pytest.mark.parametrize("size", [1, 2, 7, 30720])
def test_move_left_from_zero_wraps_to_last_cell(size):
    tape = Tape(size)
    tape.move_left()
    assert tape.pointer == size - 1


def test_cells_are_independent():
    tape = Tape(3)
    tape.increment()
    tape.move_right()
    tape.decrement()
    tape.move_right()
    tape.write(7)
    assert tape.snapshot() == [1, 255, 7]


def test_check_address_passes_for_every_reachable_index():
    tape = Tape(5)
    for _ in range(12):
        tape.check_address("reading from")
        tape.move_right()
    for _ in range(12):
        tape.check_address("reading from")
        tape.move_left()


def test_check_address_trips_on_sentinel():
    tape = Tape(5)
    tape.pointer = 5  # only reachable by poking the attribute directly
    with pytest.raises(InvalidAddress) as exc:
        tape.check_address("incrementing value at")
    assert exc.value.operation == "incrementing value at"
    assert exc.value.address == 5
    assert "invalid memory address 5" in str(exc.value)


def test_allocation_failure(monkeypatch):
    import bfi.core.tape as tape_module

    def fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(tape_module.np, "zeros", fail)
    with pytest.raises(ResourceAcquisitionFailure) as exc:
        Tape(1 << 40)
    assert exc.value.requested == 1 << 40
    assert exc.value.buffer == "tape"
    assert "could not allocate tape" in str(exc.value)
