from bars import HighlightState, Role, EMPTY_HIGHLIGHT


def test_empty_highlight_assigns_no_roles():
    assert all(EMPTY_HIGHLIGHT.roles_for(i) == set() for i in range(10))
    assert EMPTY_HIGHLIGHT.is_empty()


def test_index_zero_can_hold_roles():
    state = HighlightState(current=0, min_index=0, comparing=(0, 1))
    assert state.roles_for(0) == {Role.CURRENT, Role.MIN, Role.COMPARING}


def test_sorted_prefix_covers_leading_indices_only():
    state = HighlightState(sorted_prefix_count=3)
    assert [Role.SORTED in state.roles_for(i) for i in range(5)] == [True, True, True, False, False]


def test_roles_overlap_independently():
    state = HighlightState(sorted_prefix_count=2, current=1, comparing=(1, 4))
    assert state.roles_for(1) == {Role.SORTED, Role.CURRENT, Role.COMPARING}
    assert state.roles_for(4) == {Role.COMPARING}
    assert state.roles_for(3) == set()


def test_to_dict():
    state = HighlightState(sorted_prefix_count=1, current=2, min_index=3, comparing=(4, 5))
    assert state.to_dict() == {"sorted": 1, "current": 2, "min": 3, "comparing": [4, 5]}


def test_states_compare_by_value():
    assert HighlightState(current=1) == HighlightState(current=1)
    assert not HighlightState(current=1).is_empty()
