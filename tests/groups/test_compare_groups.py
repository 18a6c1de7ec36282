"""
Tests for group_observations() and compare_groups().
"""

import pytest

from edastat.core.exceptions import DimensionError
from edastat.groups import compare_groups, group_observations, group_report


class TestGroupObservations:

    def test_split(self, group_rows):
        groups = group_observations(group_rows, 'response', 'dose')
        assert groups == {'low': [1.0, 2.0, 3.0], 'high': [10.0, 11.0, 12.0]}

    def test_first_appearance_order(self, group_rows):
        assert list(group_observations(group_rows, 'response', 'dose')) == ['low', 'high']

    def test_numeric_levels_use_text_labels(self):
        rows = [{'g': 1, 'y': 1}, {'g': 1.0, 'y': 2}, {'g': 2, 'y': 3}]
        assert group_observations(rows, 'y', 'g') == {'1': [1.0, 2.0], '2': [3.0]}

    def test_missing_column(self, group_rows):
        with pytest.raises(DimensionError, match="missing column 'weight'"):
            group_observations(group_rows, 'weight', 'dose')


class TestCompareGroups:

    def test_matches_group_report(self, group_rows):
        via_rows = compare_groups(group_rows, 'response', 'dose')
        direct = group_report({'low': [1, 2, 3], 'high': [10, 11, 12]})
        assert via_rows.f_value == pytest.approx(direct.f_value)
        assert via_rows.p_value == pytest.approx(direct.p_value)
        assert via_rows.eta_squared == pytest.approx(direct.eta_squared)

    def test_insufficient_data(self):
        rows = [{'g': 'a', 'y': 1}, {'g': 'a', 'y': 2}, {'g': None, 'y': 3}]
        assert compare_groups(rows, 'y', 'g') is None
