"""Abstract read-only lookup of countries and their cities."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CountryRepository(ABC):

    @abstractmethod
    def list_all(self) -> dict[str, list[str]]:
        """Return ``{country name: [city names]}``."""

    def cities_for(self, country: str) -> list[str] | None:
        """Return the cities of *country*, or None if it is unknown."""
        for name, cities in self.list_all().items():
            if name.lower() == country.lower():
                return cities
        return None
