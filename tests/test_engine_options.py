import pytest

from unfuzzy.engine_options import (
    aggregation_choice,
    aggregation_selection,
    clamp_parameter,
    implication_choices,
    s_norm_selection,
    t_norm_selection,
)
from unfuzzy.implication import ImplicationKind


@pytest.mark.parametrize(
    "value, low, high, expected",
    [(-3.0, 0.0, 10.0, 0.0), (12.5, 0.0, 10.0, 10.0), (4.25, 0.0, 10.0, 4.25), (0.5, 1.0, 10.0, 1.0)],
)
def test_clamp_parameter(value, low, high, expected):
    assert clamp_parameter(value, low, high) == expected


def test_clamp_parameter_bounds_are_kept():
    assert clamp_parameter(1.0, 0.0, 1.0) == 1.0
    assert clamp_parameter(0.0, 0.0, 1.0) == 0.0


def test_t_norm_selection_swaps_first_two():
    assert t_norm_selection(0) == 1
    assert t_norm_selection(1) == 0


def test_t_norm_selection_unknown_raises():
    with pytest.raises(ValueError):
        t_norm_selection(6)


def test_s_norm_selection_unknown_raises():
    with pytest.raises(ValueError):
        s_norm_selection(0)


def test_aggregation_selection_unknown_raises():
    with pytest.raises(ValueError):
        aggregation_selection(13)


@pytest.mark.parametrize("identifier", [10, 11, 12, 6])
def test_s_norms_agree_between_lists(identifier):
    index = aggregation_selection(identifier)
    assert aggregation_choice(index) == ("s", s_norm_selection(identifier))


@pytest.mark.parametrize("identifier", [0, 1, 2, 3, 4, 5, 7, 8, 9])
def test_t_norms_land_in_t_group(identifier):
    choice = aggregation_choice(aggregation_selection(identifier))
    assert choice is not None
    assert choice[0] == "t"


def test_aggregation_choice_separator():
    assert aggregation_choice(4) is None


def test_aggregation_choice_t_group_starts_after_separator():
    assert aggregation_choice(5) == ("t", 0)


@pytest.mark.parametrize("index", [-1, 14])
def test_aggregation_choice_out_of_range(index):
    with pytest.raises(ValueError):
        aggregation_choice(index)


def test_implication_choices_order():
    choices = implication_choices()
    assert len(choices) == len(ImplicationKind)
    assert choices[0] == "Product"
    assert choices[ImplicationKind.ZADEH] == "Zadeh"
    assert choices[-1] == "Sharp"


def test_implication_choices_are_distinct():
    choices = implication_choices()
    assert len(set(choices)) == len(choices)
    assert all(choices)