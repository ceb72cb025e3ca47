"""Reference data layer for the Canteiro estimation engine."""

from canteiro.data.cities import City, CityTaxes
from canteiro.data.fees import FeeBracket, bracket_fee
from canteiro.data.repository import ReferenceDataRepository

__all__ = [
    "City",
    "CityTaxes",
    "FeeBracket",
    "ReferenceDataRepository",
    "bracket_fee",
]
