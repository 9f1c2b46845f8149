from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


SALUTATIONS: Mapping[str, str] = MappingProxyType({
    "mister": "Mr.",
    "master": "Mr.",
    "mr": "Mr.",
    "mrs": "Mrs.",
    "ms": "Ms.",
    "miss": "Ms.",
    "dr": "Dr.",
    "rev": "Rev.",
    "fr": "Fr.",
})

SUFFIXES: tuple[str, ...] = (
    "I", "II", "III", "IV", "V",
    "Senior", "Junior", "Jr", "Sr",
    "PhD", "APR", "RPh", "PE", "MD", "MA", "DMD", "CME",
    "BVM", "CFRE", "CLU", "CPA", "CSC", "CSJ", "DC", "DD", "DDS", "DO", "DVM", "EdD", "Esq",
    "JD", "LLD", "OD", "OSB", "PC", "Ret", "RGS", "RN", "RNC", "SHCJ", "SJ", "SNJM", "SSMO",
    "USA", "USAF", "USAFR", "USAR", "USCG", "USMC", "USMCR", "USN", "USNR",
)

# particles that open a compound last name, e.g. "Von Bayat"
COMPOUND_LAST_NAME_MARKERS: frozenset[str] = frozenset({
    "vere", "von", "van", "de", "del", "della", "di", "da", "pietro",
    "vanden", "du", "st.", "st", "la", "lo", "ter",
})


@dataclass(frozen=True)
class ParserConfiguration:
    salutations: Mapping[str, str] = field(default_factory=lambda: SALUTATIONS)  # lower-cased, period-free → canonical
    suffixes: tuple[str, ...] = SUFFIXES             # canonical casing
    compound_last_name_markers: frozenset[str] = COMPOUND_LAST_NAME_MARKERS
    ignored_chars: str = "."
    suffix_lookup: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lookup: dict[str, str] = {}
        for suffix in self.suffixes:
            lookup.setdefault(suffix.lower(), suffix)
        object.__setattr__(self, "suffix_lookup", MappingProxyType(lookup))


DEFAULT_CONFIGURATION = ParserConfiguration()
