from dataclasses import asdict, dataclass
from functools import cmp_to_key
from typing import Iterable


@dataclass(frozen=True)
class NameRecord:
    salutation: str = ""
    first_name: str = ""
    middle_initials: str = ""
    last_name: str = ""
    suffix: str = ""

    @property
    def full_name(self) -> str:
        parts = [
            self.salutation,
            self.first_name,
            self.middle_initials,
            self.last_name,
            self.suffix,
        ]
        return " ".join(part for part in parts if part)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def _compare_text(left: str, right: str) -> int:
    left, right = left.lower(), right.lower()
    return (left > right) - (left < right)


def compare_names(left: NameRecord | None, right: NameRecord | None) -> int:
    """Order by last name, first name, then middle initials, ignoring case.

    ``None`` stands for an absent record and sorts before any present one.
    """
    if left is None or right is None:
        return (left is not None) - (right is not None)
    for attr in ("last_name", "first_name", "middle_initials"):
        diff = _compare_text(getattr(left, attr), getattr(right, attr))
        if diff != 0:
            return diff
    return 0


def names_equal(left: NameRecord | None, right: NameRecord | None) -> bool:
    if left is None or right is None:
        return left is None and right is None
    return asdict(left) == asdict(right)


def sort_names(records: Iterable[NameRecord | None]) -> list[NameRecord | None]:
    return sorted(records, key=cmp_to_key(compare_names))
