"""Move ledger recording, undo, and its coupling with the board."""

import pytest

from Omok_Duel.Board import Board, Color
from Omok_Duel.Ledger import MoveLedger
from Omok_Duel.engine.errors import InvalidMove


def test_record_assigns_sequence_and_places_stone():
    b = Board()
    ledger = MoveLedger(b)
    first = ledger.record(7, 7, Color.BLACK)
    second = ledger.record(7, 8, Color.WHITE)
    assert (first.index, second.index) == (1, 2)
    assert b.at(7, 8) is Color.WHITE
    assert ledger.last_player() is Color.WHITE
    assert ledger.notations() == ["H8", "I8"]


def test_failed_placement_records_nothing():
    b = Board()
    ledger = MoveLedger(b)
    ledger.record(0, 0, Color.BLACK)
    with pytest.raises(InvalidMove):
        ledger.record(0, 0, Color.WHITE)
    assert len(ledger) == 1
    assert b.stone_count == 1


def test_undo_last_pops_newest_first_and_clears_cells():
    b = Board()
    ledger = MoveLedger(b)
    for i, color in enumerate([Color.BLACK, Color.WHITE, Color.BLACK]):
        ledger.record(0, i, color)
    undone = ledger.undo_last(2)
    assert [m.cell for m in undone] == [(0, 2), (0, 1)]
    assert b.at(0, 2) is None and b.at(0, 1) is None
    assert len(ledger) == b.stone_count == 1
    assert ledger.last_player() is Color.BLACK


def test_undo_more_than_available():
    b = Board()
    ledger = MoveLedger(b)
    ledger.record(4, 4, Color.BLACK)
    assert len(ledger.undo_last(5)) == 1
    assert ledger.last_player() is None
    assert ledger.undo_last(1) == []


def test_counts():
    b = Board()
    ledger = MoveLedger(b)
    ledger.record(1, 1, Color.BLACK)
    ledger.record(1, 2, Color.WHITE)
    ledger.record(1, 3, Color.BLACK)
    assert ledger.counts() == {Color.BLACK: 2, Color.WHITE: 1}
