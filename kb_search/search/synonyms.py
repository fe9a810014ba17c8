"""
Domain thesaurus for housing-management queries.

Maps a canonical concept key to its synonyms, abbreviations and common
spellings, and expands query words into every surface form of the concept
they belong to.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Set, Tuple

from .normalizer import normalize

logger = logging.getLogger(__name__)

HOUSING_SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "счетчик": (
            "счётчик",
            "ипу",
            "прибор учета",
            "прибор учёта",
            "водомер",
            "электросчетчик",
            "электросчётчик",
            "теплосчетчик",
            "теплосчётчик",
            "одпу",
            "индивидуальный прибор",
        ),
        "уборка": (
            "клининг",
            "мытье",
            "мытьё",
            "чистка",
            "санитарная обработка",
            "влажная уборка",
        ),
        "подъезд": ("парадная", "лестничная клетка", "лестница", "мкд", "мопы", "моп"),
        "вандализм": ("порча", "повреждение", "разрушение", "граффити", "надписи", "рисунки"),
        "отопление": (
            "тепло",
            "батареи",
            "радиаторы",
            "теплоснабжение",
            "отопительный сезон",
            "холодно",
        ),
        "вода": (
            "водоснабжение",
            "гвс",
            "хвс",
            "горячая вода",
            "холодная вода",
            "водопровод",
            "напор",
        ),
        "лифт": ("лифтовое оборудование", "подъемник", "подъёмник", "кабина лифта"),
        "освещение": ("свет", "лампа", "лампочка", "светильник", "фонарь", "темно", "темнота"),
        "крыша": ("кровля", "протечка", "течь", "течет", "течёт", "капает"),
        "мусор": ("тбо", "тко", "отходы", "мусоропровод", "контейнер", "бак"),
        "домофон": ("дверь", "замок", "ключ", "доступ", "вход"),
        "квитанция": ("платежка", "платёжка", "счет", "счёт", "еирц", "оплата", "начисление"),
        "перерасчет": ("перерасчёт", "возврат", "корректировка", "пересчет", "пересчёт"),
        "ремонт": ("восстановление", "починка", "устранение", "работы"),
        "двор": ("придомовая территория", "благоустройство", "площадка", "парковка"),
        "шум": ("громко", "громкий", "звук", "грохот", "стук"),
        "запах": ("вонь", "воняет", "пахнет", "канализация", "газ"),
        "жалоба": ("претензия", "заявление", "обращение", "недовольство"),
        "управляющая компания": (
            "ук",
            "управляющая организация",
            "уо",
            "жэк",
            "жкх",
            "тсж",
            "тсн",
        ),
    }
)


class SynonymTable:
    """
    Immutable thesaurus with a reverse lookup index.

    The reverse index maps every normalized variant (and the normalized
    concept key itself) to its concept key. When the seed data maps one
    variant to several concepts the last one wins.

    Build once at startup and share: instances are never mutated.
    """

    def __init__(self, synonyms: Mapping[str, Iterable[str]]):
        """
        Initialize synonym table.

        Args:
            synonyms: Mapping of concept key to its variants
        """
        table = {key: tuple(variants) for key, variants in synonyms.items()}
        reverse = {}
        for key, variants in table.items():
            reverse[normalize(key)] = key
            for variant in variants:
                reverse[normalize(variant)] = key

        self._synonyms = MappingProxyType(table)
        self._reverse_index = MappingProxyType(reverse)

        logger.debug(
            "Built synonym table: %d concepts, %d lookup forms",
            len(table),
            len(reverse),
        )

    @classmethod
    def default(cls) -> "SynonymTable":
        """Create the table for the built-in housing-management thesaurus."""
        return cls(HOUSING_SYNONYMS)

    @property
    def concepts(self) -> Mapping[str, Tuple[str, ...]]:
        return self._synonyms

    def concept_for(self, word: str) -> Optional[str]:
        """Return the concept key owning a normalized word, if any."""
        return self._reverse_index.get(word)

    def variants(self, concept: str) -> Tuple[str, ...]:
        return self._synonyms.get(concept, ())

    def expand(self, query: Optional[str]) -> Set[str]:
        """
        Expand a query into the set of terms to score against.

        Every normalized query word is kept verbatim. A word that belongs to
        a concept also brings in the concept key and every variant of that
        concept, normalized.

        Examples:
            "ипу" -> {"ипу", "счетчик", "прибор учета", "водомер", ...}
            "кот" -> {"кот"}
        """
        words = normalize(query).split()
        expanded = set(words)

        for word in words:
            concept = self._reverse_index.get(word)
            if concept is None:
                continue
            expanded.add(normalize(concept))
            expanded.update(normalize(variant) for variant in self._synonyms[concept])

        return expanded

    def __len__(self) -> int:
        return len(self._synonyms)
