from camwatch.class_filter import ClassFilter, default_class_filter


def test_new_filter_counts_everything():
    flt = ClassFilter()
    assert flt.is_count_all()
    assert flt.selected_count() == 0
    assert flt.should_count(0)
    assert flt.should_count(79)


def test_selection_limits_counting():
    flt = ClassFilter()
    flt.select([0, 2])
    assert not flt.is_count_all()
    assert flt.selected_count() == 2
    assert flt.should_count(2)
    assert not flt.should_count(1)
    assert flt.selected_classes() == {0, 2}


def test_duplicate_ids_collapse():
    flt = ClassFilter()
    flt.select([3, 3, 3])
    assert flt.selected_count() == 1


def test_empty_selection_counts_all():
    flt = ClassFilter()
    flt.select([5])
    flt.select([])
    assert flt.is_count_all()
    assert flt.should_count(1)


def test_clear_restores_count_all():
    flt = ClassFilter()
    flt.select({1, 4})
    flt.clear()
    assert flt.is_count_all()
    assert flt.selected_classes() == frozenset()


def test_selection_snapshot_is_independent():
    flt = ClassFilter()
    ids = {1, 2}
    flt.select(ids)
    ids.add(9)
    snapshot = flt.selected_classes()
    flt.clear()
    assert snapshot == {1, 2}
    assert not flt.should_count(9) or flt.is_count_all()
    assert flt.is_count_all()


def test_default_filter_is_shared():
    first = default_class_filter()
    previous = first.selected_classes()
    try:
        first.select([7, 11])
        second = default_class_filter()
        assert second.selected_classes() == {7, 11}
        assert second.selected_count() == 2
        assert not second.should_count(3)
    finally:
        first.select(previous)
    assert default_class_filter().selected_classes() == previous