"""Demo dataset: birthplaces of British prime ministers.

Shows both ways of modelling unknown values: ``left_office`` is None for
the sitting prime minister and ``birthplace`` is None where it is unknown.
Both act as nulls when sorting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from sortable import NullHandling, Ordering, SortableField, SortBy, partial_cmp

__all__ = ["Person", "PersonField", "load_prime_ministers"]


@dataclass(frozen=True)
class Person:
    name: str
    # None while still in office
    left_office: Optional[int]
    # None when unknown
    birthplace: Optional[str]
    country: str

    @property
    def left_office_text(self) -> str:
        return "Present" if self.left_office is None else str(self.left_office)

    @property
    def birthplace_text(self) -> str:
        return "Unknown" if self.birthplace is None else self.birthplace


class PersonField(SortableField, Enum):
    NAME = "name"
    LEFT_OFFICE = "left_office"
    BIRTHPLACE = "birthplace"
    COUNTRY = "country"

    @classmethod
    def default(cls) -> "PersonField":
        return cls.LEFT_OFFICE

    def partial_cmp_by(self, a: Any, b: Any) -> Optional[Ordering]:
        return partial_cmp(getattr(a, self.value), getattr(b, self.value))

    def sort_by(self) -> Optional[SortBy]:
        # Most recent prime ministers first, not toggleable
        if self is PersonField.LEFT_OFFICE:
            return SortBy.decreasing()
        return SortBy.increasing_or_decreasing()

    def null_handling(self) -> NullHandling:
        # The sitting prime minister belongs at the top
        if self is PersonField.LEFT_OFFICE:
            return NullHandling.FIRST
        return NullHandling.LAST


_PRIME_MINISTERS = [
    ("Robert Walpole", 1742, "Houghton Hall, Norfolk", "England"),
    ("Spencer Compton", 1743, "Compton Wynyates, Warwickshire", "England"),
    ("Henry Pelham", 1756, "Laughton, Sussex", "England"),
    ("William Cavendish", 1757, None, "England"),
    ("Thomas Pelham-Holles", 1762, "London", "England"),
    ("John Stuart", 1763, "Parliament Square, Edinburgh", "Scotland"),
    ("George Grenville", 1765, "Wotton, Buckinghamshire", "England"),
    ("William Pitt", 1768, "Westminster, London", "England"),
    ("Augustus FitzRoy", 1770, None, "England"),
    ("Frederick North", 1782, "Piccadilly, London", "England"),
    ("William Petty", 1783, "Dublin, County Dublin", "Republic of Ireland"),
    ("Henry Addington", 1804, "Holborn, London", "England"),
    ("Spencer Perceval", 1812, "Mayfair, London", "England"),
    ("Arthur Wellesley", 1834, "Dublin, County Dublin", "Republic of Ireland"),
    ("Robert Peel", 1846, "Bury, Lancashire", "England"),
    ("Benjamin Disraeli", 1868, "Bloomsbury, Middlesex", "England"),
    ("William Ewart Gladstone", 1894, "Liverpool, Lancashire", "England"),
    ("Arthur Balfour", 1905, "Whittingehame, East Lothian", "Scotland"),
    ("David Lloyd George", 1922, "Chorlton-on-Medlock, Lancashire", "England"),
    ("Bonar Law", 1923, "Rexton, Kent County", "Canada"),
    ("Winston Churchill", 1955, "Blenheim, Oxfordshire", "England"),
    ("Clement Attlee", 1951, "Putney, Surrey", "England"),
    ("Harold Wilson", 1976, "Huddersfield, West Riding of Yorkshire", "England"),
    ("Edward Heath", 1974, "Broadstairs, Kent", "England"),
    ("Margaret Thatcher", 1990, "Grantham, Lincolnshire", "England"),
    ("John Major", 1997, "St Helier, Surrey", "England"),
    ("Tony Blair", 2007, "Edinburgh, Midlothian", "Scotland"),
    ("Gordon Brown", 2010, "Giffnock, Renfrewshire", "Scotland"),
    ("David Cameron", 2016, "Marylebone, London", "England"),
    ("Theresa May", 2019, "Eastbourne, East Sussex", "England"),
    ("Boris Johnson", 2022, "New York City, New York", "United States"),
    ("Liz Truss", 2022, "Oxford, Oxfordshire", "England"),
    ("Rishi Sunak", None, "Southampton, Hampshire", "England"),
]


def load_prime_ministers() -> List[Person]:
    return [Person(*row) for row in _PRIME_MINISTERS]
