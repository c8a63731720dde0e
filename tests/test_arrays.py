import pytest

from contestsolvers.arrays import (
    can_be_increasing,
    can_pass_all_levels,
    choosing_teams,
    descending_permutation,
    equal_candies,
    form_teams,
    good_kid_product,
    good_matrix_sum,
    next_round,
    sereja_and_dima,
    team_problems,
)


def test_next_round_example():
    assert next_round([10, 9, 8, 7, 7, 7, 5, 5], 5) == 6


def test_next_round_zero_scores():
    assert next_round([0, 0, 0, 0], 2) == 0


def test_next_round_bad_k():
    with pytest.raises(ValueError):
        next_round([1, 2], 0)
    with pytest.raises(ValueError):
        next_round([1, 2], 3)


def test_equal_candies_equal_boxes():
    assert equal_candies([4, 4, 4]) == 0
    assert equal_candies([]) == 0


@pytest.mark.parametrize("counts", [[1, 2, 3, 4, 5], [1000, 1000, 5, 1000, 1000, 1000], [7]])
def test_equal_candies_invariants(counts):
    result = equal_candies(counts)
    assert equal_candies([c + 10 for c in counts]) == result
    assert equal_candies(counts + [min(counts)]) == result
    assert sum(counts) - result == min(counts) * len(counts)


def test_can_be_increasing():
    assert can_be_increasing([1, 1, 1, 1]) is False
    assert can_be_increasing([8, 7, 1, 3, 4]) is True
    assert can_be_increasing([1]) is True


def test_good_kid_product_example():
    assert good_kid_product([2, 2, 1, 2]) == 16


def test_good_kid_product_order_invariant():
    assert good_kid_product([3, 0, 9]) == good_kid_product([9, 3, 0])
    assert good_kid_product([0, 0]) == 0


def test_good_kid_product_empty():
    with pytest.raises(ValueError):
        good_kid_product([])


def test_team_problems():
    rows = [[1, 1, 0], [1, 1, 1], [1, 0, 0]]
    assert team_problems(rows) == 2
    assert team_problems([[1, 1, 1]] * 5) == 5
    assert team_problems([[0, 0, 1]] * 5) == 0


def test_descending_permutation_odd():
    assert descending_permutation(1) is None
    assert descending_permutation(7) is None


@pytest.mark.parametrize("n", [2, 4, 10])
def test_descending_permutation_even(n):
    result = descending_permutation(n)
    assert sorted(result) == list(range(1, n + 1))
    assert result == sorted(result, reverse=True)


def test_sereja_and_dima_example():
    assert sereja_and_dima([4, 1, 2, 10]) == (12, 5)


@pytest.mark.parametrize("cards", [[1, 2, 3, 4, 5, 6, 7], [5], [3, 9, 1]])
def test_sereja_and_dima_total(cards):
    sereja, dima = sereja_and_dima(cards)
    assert sereja + dima == sum(cards)


@pytest.mark.parametrize("n", [0, 2, 3, 7, 9])
def test_choosing_teams_everyone_fresh(n):
    assert choosing_teams([0] * n, 0) == n // 3


def test_choosing_teams_exhausted():
    assert choosing_teams([5, 5, 5], 1) == 0


def test_can_pass_all_levels():
    assert can_pass_all_levels(4, [1, 2, 3], [2, 4]) is True
    assert can_pass_all_levels(4, [1, 2, 3], [2, 3]) is False
    assert can_pass_all_levels(2, [], [1, 2]) is True
    assert can_pass_all_levels(1, [], []) is False


def test_form_teams_example():
    assert form_teams([1, 3, 1, 3, 2, 1, 2]) == [(1, 5, 2), (3, 7, 4)]


def test_form_teams_missing_skill():
    assert form_teams([2, 1, 1, 2]) == []


def test_good_matrix_sum_three_covers_all():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert good_matrix_sum(matrix) == sum(map(sum, matrix))


def test_good_matrix_sum_single():
    assert good_matrix_sum([[42]]) == 42


def test_good_matrix_sum_ignores_off_cells():
    base = [[1] * 5 for _ in range(5)]
    changed = [row[:] for row in base]
    changed[0][1] = 100
    assert good_matrix_sum(changed) == good_matrix_sum(base)


def test_good_matrix_sum_not_square():
    with pytest.raises(ValueError):
        good_matrix_sum([[1, 2], [3]])