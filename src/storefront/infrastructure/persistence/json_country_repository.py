"""JSON-file-backed, read-only implementation of CountryRepository.

The file is seed data: ``{"Country": ["City", ...], ...}``.
"""

from __future__ import annotations

from pathlib import Path

from storefront.domain.repository.country_repository import CountryRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonCountryRepository(CountryRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path, default_factory=dict)

    def list_all(self) -> dict[str, list[str]]:
        return {
            str(country): [str(city) for city in cities]
            for country, cities in self._collection.read().items()
        }
