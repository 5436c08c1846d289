import math

import pytest

from vectorflow.data_utils import l1_normalize, l2_normalize

SAMPLE = [3.0, -1.5, 0.25, 7.0]


def test_l1_absolute_values_sum_to_one():
    result = l1_normalize(SAMPLE)
    assert sum(abs(v) for v in result) == pytest.approx(1.0)


def test_l1_keeps_signs_and_ratios():
    result = l1_normalize(SAMPLE)
    assert [v > 0 for v in result] == [v > 0 for v in SAMPLE]
    assert result[0] / result[3] == pytest.approx(SAMPLE[0] / SAMPLE[3])


def test_l1_scale_invariant():
    assert l1_normalize([5 * v for v in SAMPLE]) == pytest.approx(l1_normalize(SAMPLE))


def test_l1_zero_vector_unchanged():
    assert l1_normalize([0.0, 0.0, 0.0]) == [0.0, 0.0, 0.0]


def test_l1_does_not_mutate_input():
    data = list(SAMPLE)
    l1_normalize(data)
    assert data == SAMPLE


def test_l1_idempotent():
    once = l1_normalize(SAMPLE)
    assert l1_normalize(once) == pytest.approx(once)


def test_l2_unit_length():
    result = l2_normalize(SAMPLE)
    assert math.sqrt(sum(v * v for v in result)) == pytest.approx(1.0)


def test_l2_scale_invariant():
    assert l2_normalize([3 * v for v in SAMPLE]) == pytest.approx(l2_normalize(SAMPLE))


def test_l2_keeps_direction():
    result = l2_normalize(SAMPLE)
    assert result[1] / result[2] == pytest.approx(SAMPLE[1] / SAMPLE[2])


def test_l2_zero_vector_unchanged():
    assert l2_normalize([0.0, 0.0]) == [0.0, 0.0]


def test_l2_does_not_mutate_input():
    data = list(SAMPLE)
    l2_normalize(data)
    assert data == SAMPLE


def test_empty_input_gives_empty_output():
    assert l1_normalize([]) == []
    assert l2_normalize([]) == []


def test_accepts_generators():
    assert l2_normalize(v for v in SAMPLE) == pytest.approx(l2_normalize(SAMPLE))