"""
Equivalence Tables

Static lookup data for IELTS answer matching: ordinals, months, number words,
units of measurement and currencies. Each table maps a canonical token to the
set of spellings graders accept for it. Tables are built once at import time
and exposed as read-only mappings.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

_DIGIT_DAY = re.compile(r'^(\d{1,2})(?:st|nd|rd|th)?$')


class EquivalenceCategory(str, Enum):
    """Categories of equivalence tables."""
    ORDINAL = "ordinal"
    MONTH = "month"
    NUMBER = "number"
    MEASUREMENT_UNIT = "measurement_unit"
    CURRENCY = "currency"


def _freeze(raw: Dict[str, Iterable[str]]) -> Mapping[str, FrozenSet[str]]:
    """Build a read-only table, ensuring every set holds its own key."""
    frozen = {}
    for key, spellings in raw.items():
        values = {spelling.lower() for spelling in spellings}
        values.add(key.lower())
        frozen[key.lower()] = frozenset(values)
    return MappingProxyType(frozen)


ORDINALS = _freeze({
    '1st': ['1', 'first', '1st'],
    '2nd': ['2', 'second', '2nd'],
    '3rd': ['3', 'third', '3rd'],
    '4th': ['4', 'fourth', '4th'],
    '5th': ['5', 'fifth', '5th'],
    '6th': ['6', 'sixth', '6th'],
    '7th': ['7', 'seventh', '7th'],
    '8th': ['8', 'eighth', '8th'],
    '9th': ['9', 'ninth', '9th'],
    '10th': ['10', 'tenth', '10th'],
    '11th': ['11', 'eleventh', '11th'],
    '12th': ['12', 'twelfth', '12th'],
    '13th': ['13', 'thirteenth', '13th'],
    '14th': ['14', 'fourteenth', '14th'],
    '15th': ['15', 'fifteenth', '15th'],
    '16th': ['16', 'sixteenth', '16th'],
    '17th': ['17', 'seventeenth', '17th'],
    '18th': ['18', 'eighteenth', '18th'],
    '19th': ['19', 'nineteenth', '19th'],
    '20th': ['20', 'twentieth', '20th'],
    '21st': ['21', 'twenty-first', '21st'],
    '22nd': ['22', 'twenty-second', '22nd'],
    '23rd': ['23', 'twenty-third', '23rd'],
    '24th': ['24', 'twenty-fourth', '24th'],
    '25th': ['25', 'twenty-fifth', '25th'],
    '26th': ['26', 'twenty-sixth', '26th'],
    '27th': ['27', 'twenty-seventh', '27th'],
    '28th': ['28', 'twenty-eighth', '28th'],
    '29th': ['29', 'twenty-ninth', '29th'],
    '30th': ['30', 'thirtieth', '30th'],
    '31st': ['31', 'thirty-first', '31st'],
})

# Insertion order is calendar order; month numbers are derived from it.
MONTHS = _freeze({
    'january': ['jan', 'january', '01', '1'],
    'february': ['feb', 'february', '02', '2'],
    'march': ['mar', 'march', '03', '3'],
    'april': ['apr', 'april', '04', '4'],
    'may': ['may', '05', '5'],
    'june': ['jun', 'june', '06', '6'],
    'july': ['jul', 'july', '07', '7'],
    'august': ['aug', 'august', '08', '8'],
    'september': ['sep', 'sept', 'september', '09', '9'],
    'october': ['oct', 'october', '10'],
    'november': ['nov', 'november', '11'],
    'december': ['dec', 'december', '12'],
})

NUMBER_WORDS = _freeze({
    '0': ['zero', 'o', 'oh', '0'],
    '1': ['one', '1'],
    '2': ['two', '2'],
    '3': ['three', '3'],
    '4': ['four', '4'],
    '5': ['five', '5'],
    '6': ['six', '6'],
    '7': ['seven', '7'],
    '8': ['eight', '8'],
    '9': ['nine', '9'],
    '10': ['ten', '10'],
    '11': ['eleven', '11'],
    '12': ['twelve', '12'],
    '13': ['thirteen', '13'],
    '14': ['fourteen', '14'],
    '15': ['fifteen', '15'],
    '16': ['sixteen', '16'],
    '17': ['seventeen', '17'],
    '18': ['eighteen', '18'],
    '19': ['nineteen', '19'],
    '20': ['twenty', '20'],
    '30': ['thirty', '30'],
    '40': ['forty', '40'],
    '50': ['fifty', '50'],
    '60': ['sixty', '60'],
    '70': ['seventy', '70'],
    '80': ['eighty', '80'],
    '90': ['ninety', '90'],
    '100': ['hundred', 'one hundred', '100'],
    '1000': ['thousand', 'one thousand', '1000', '1,000'],
    '1000000': ['million', 'one million', '1000000', '1,000,000'],
})

MEASUREMENT_UNITS = _freeze({
    'km': ['km', 'kms', 'kilometre', 'kilometres', 'kilometer', 'kilometers'],
    'm': ['m', 'metre', 'metres', 'meter', 'meters'],
    'cm': ['cm', 'centimetre', 'centimetres', 'centimeter', 'centimeters'],
    'mm': ['mm', 'millimetre', 'millimetres', 'millimeter', 'millimeters'],
    'kg': ['kg', 'kgs', 'kilogram', 'kilograms', 'kilo', 'kilos'],
    'g': ['g', 'gram', 'grams'],
    'mg': ['mg', 'milligram', 'milligrams'],
    'l': ['l', 'litre', 'litres', 'liter', 'liters'],
    'ml': ['ml', 'millilitre', 'millilitres', 'milliliter', 'milliliters'],
    'ft': ['ft', 'foot', 'feet'],
    'in': ['in', 'inch', 'inches'],
    'mi': ['mi', 'mile', 'miles'],
    'lb': ['lb', 'lbs', 'pound', 'pounds'],
    'oz': ['oz', 'ounce', 'ounces'],
})

CURRENCIES = _freeze({
    '$': ['$', 'dollar', 'dollars', 'usd'],
    '£': ['£', 'pound', 'pounds', 'gbp'],
    '€': ['€', 'euro', 'euros', 'eur'],
    '¥': ['¥', 'yen', 'jpy'],
})

EQUIVALENCE_TABLES: Mapping[EquivalenceCategory, Mapping[str, FrozenSet[str]]] = MappingProxyType({
    EquivalenceCategory.ORDINAL: ORDINALS,
    EquivalenceCategory.MONTH: MONTHS,
    EquivalenceCategory.NUMBER: NUMBER_WORDS,
    EquivalenceCategory.MEASUREMENT_UNIT: MEASUREMENT_UNITS,
    EquivalenceCategory.CURRENCY: CURRENCIES,
})


def canonical_key(category: EquivalenceCategory, token: Optional[str]) -> Optional[str]:
    """
    Find the canonical key whose spelling set contains a token.

    Args:
        category: Table to search
        token: Spelling to look up (case-insensitive)

    Returns:
        The canonical key, or None when the token is unknown
    """
    if not token:
        return None

    token = token.lower()
    for key, spellings in EQUIVALENCE_TABLES[category].items():
        if token in spellings:
            return key
    return None


def are_equivalent(category: EquivalenceCategory, first: Optional[str], second: Optional[str]) -> bool:
    """Check whether two tokens belong to the same entry of a table."""
    if not first or not second:
        return False

    first, second = first.lower(), second.lower()
    return any(
        first in spellings and second in spellings
        for spellings in EQUIVALENCE_TABLES[category].values()
    )


def month_number(token: Optional[str]) -> Optional[int]:
    """Resolve a month name, abbreviation or number to 1-12."""
    key = canonical_key(EquivalenceCategory.MONTH, token)
    if key is None:
        return None
    return list(MONTHS).index(key) + 1


def day_number(token: Optional[str]) -> Optional[int]:
    """Resolve a day token such as '5', '05', '5th' or 'fifth' to 1-31."""
    if token:
        digits = _DIGIT_DAY.match(token.lower())
        if digits:
            token = str(int(digits.group(1)))
    key = canonical_key(EquivalenceCategory.ORDINAL, token)
    if key is None:
        return None
    return int(key[:-2])
