"""
Tests for Equivalence Tables
"""

import pytest

from ielts_answers.evaluation.tables import (
    EQUIVALENCE_TABLES,
    EquivalenceCategory,
    are_equivalent,
    canonical_key,
    day_number,
    month_number,
)


class TestEquivalenceTables:
    """Test cases for the static lookup tables."""

    @pytest.mark.parametrize("category", list(EquivalenceCategory))
    def test_every_set_contains_its_key(self, category):
        """Test every spelling set is non-empty and holds the canonical form."""
        for key, spellings in EQUIVALENCE_TABLES[category].items():
            assert spellings
            assert key in spellings

    def test_tables_are_read_only(self):
        """Test that tables cannot be modified."""
        months = EQUIVALENCE_TABLES[EquivalenceCategory.MONTH]
        with pytest.raises(TypeError):
            months['smarch'] = frozenset({'smarch'})
        with pytest.raises(AttributeError):
            months['march'].add('mrch')

    def test_measurement_m_is_not_minutes(self):
        """Test 'm' only ever means metres."""
        assert canonical_key(EquivalenceCategory.MEASUREMENT_UNIT, 'm') == 'm'
        assert canonical_key(EquivalenceCategory.MEASUREMENT_UNIT, 'minute') is None


class TestLookups:
    """Test cases for table lookups."""

    def test_canonical_key_is_case_insensitive(self):
        """Test lookups ignore case."""
        assert canonical_key(EquivalenceCategory.CURRENCY, 'Dollars') == '$'
        assert canonical_key(EquivalenceCategory.MONTH, 'SEPT') == 'september'

    def test_canonical_key_unknown(self):
        """Test unknown and empty tokens."""
        assert canonical_key(EquivalenceCategory.NUMBER, 'eleventy') is None
        assert canonical_key(EquivalenceCategory.NUMBER, '') is None
        assert canonical_key(EquivalenceCategory.NUMBER, None) is None

    def test_are_equivalent(self):
        """Test spellings from the same entry are equivalent."""
        assert are_equivalent(EquivalenceCategory.MEASUREMENT_UNIT, 'km', 'Kilometres')
        assert are_equivalent(EquivalenceCategory.CURRENCY, '£', 'pounds')
        assert not are_equivalent(EquivalenceCategory.MEASUREMENT_UNIT, 'km', 'miles')
        assert not are_equivalent(EquivalenceCategory.CURRENCY, '$', None)

    @pytest.mark.parametrize("token,expected", [
        ('january', 1), ('Jan', 1), ('may', 5), ('sept', 9), ('09', 9), ('december', 12), ('smarch', None),
    ])
    def test_month_number(self, token, expected):
        """Test month resolution."""
        assert month_number(token) == expected

    @pytest.mark.parametrize("token,expected", [
        ('5', 5), ('05', 5), ('5th', 5), ('fifth', 5), ('21st', 21), ('twenty-first', 21),
        ('31', 31), ('32', None), ('0', None), ('beach', None),
    ])
    def test_day_number(self, token, expected):
        """Test day resolution."""
        assert day_number(token) == expected
