from conftest import T1, T2, T3, T4, ids, make_transaction

from transaction_feed.feed.accumulator import TransactionAccumulator


def test_merge_appends_in_received_order():
    acc = TransactionAccumulator()

    added = acc.merge([T2, T1])

    assert added == 2
    assert ids(acc) == ["t2", "t1"]


def test_merging_same_batch_twice_is_a_no_op():
    once = TransactionAccumulator()
    once.merge([T1, T2, T3])
    twice = TransactionAccumulator()
    twice.merge([T1, T2, T3])

    assert twice.merge([T1, T2, T3]) == 0
    assert twice.items == once.items


def test_existing_entries_keep_position_when_new_ones_arrive():
    acc = TransactionAccumulator([T1, T2])

    acc.merge([T3, T2, T1, T4])

    assert ids(acc) == ["t1", "t2", "t3", "t4"]


def test_duplicate_ids_within_one_batch_are_added_once():
    acc = TransactionAccumulator()

    acc.merge([T1, T1, T2, T1])

    assert ids(acc) == ["t1", "t2"]
    assert len(set(ids(acc))) == len(acc)


def test_merge_keeps_first_seen_values():
    acc = TransactionAccumulator([T1])
    approved_copy = make_transaction("t1", approved=True)

    acc.merge([approved_copy])

    assert acc.get("t1").approved is False


def test_replace_swaps_in_place():
    acc = TransactionAccumulator([T1, T2, T3])

    assert acc.replace(T2.with_approval(True)) is True
    assert ids(acc) == ["t1", "t2", "t3"]
    assert acc.get("t2").approved is True


def test_replace_unknown_id_returns_false():
    acc = TransactionAccumulator([T1])

    assert acc.replace(T4) is False
    assert ids(acc) == ["t1"]


def test_clear_empties_everything():
    acc = TransactionAccumulator([T1, T2])

    acc.clear()

    assert len(acc) == 0
    assert "t1" not in acc
    assert acc.merge([T1]) == 1
