import logging
from typing import Iterable

from name_parser.entity_types.name_record import NameRecord
from name_parser.parser.case_normalization import fix_case
from name_parser.parser.parser_configuration import DEFAULT_CONFIGURATION, ParserConfiguration


logger = logging.getLogger(__name__)


class EmptyNameError(ValueError):
    def __init__(self, full_name: str):
        super().__init__(f"cannot parse an empty name: {full_name!r}")
        self.full_name = full_name


def split_into_words(full_name: str) -> list[str]:
    """Split on single spaces, dropping any word that opens with "(" (nicknames etc)."""
    return [word for word in full_name.split(" ") if not word.startswith("(")]


def remove_ignored_chars(word: str, config: ParserConfiguration = DEFAULT_CONFIGURATION) -> str:
    for char in config.ignored_chars:
        word = word.replace(char, "")
    return word


def is_salutation(word: str, config: ParserConfiguration = DEFAULT_CONFIGURATION) -> str:
    """Canonical salutation for ``word`` ("mr" → "Mr."), or "" when it is not one."""
    word = remove_ignored_chars(word, config).lower()
    return config.salutations.get(word, "")


def is_suffix(word: str, config: ParserConfiguration = DEFAULT_CONFIGURATION) -> str:
    """Canonical suffix for ``word`` ("phd." → "PhD"), or "" when it is not one."""
    word = remove_ignored_chars(word, config).lower()
    return config.suffix_lookup.get(word, "")


def is_compound_last_name(word: str, config: ParserConfiguration = DEFAULT_CONFIGURATION) -> bool:
    return word.lower() in config.compound_last_name_markers


def is_initial(word: str, config: ParserConfiguration = DEFAULT_CONFIGURATION) -> bool:
    return len(remove_ignored_chars(word, config)) == 1


def format_initial(word: str, config: ParserConfiguration = DEFAULT_CONFIGURATION) -> str:
    return remove_ignored_chars(word, config).upper() + "."


def parse(full_name: str, config: ParserConfiguration = DEFAULT_CONFIGURATION) -> NameRecord:
    """
    Split a full name into salutation, first name, middle initials, last name
    and suffix.

    "Mr Ali R Von Bayat III" → Mr. / Ali / R. / Von Bayat / III
    """
    full_name = full_name.strip()
    if not full_name:
        raise EmptyNameError(full_name)

    words = split_into_words(full_name)
    if not words:
        logger.debug("only parenthetical words in %r", full_name)
        return NameRecord()

    salutation = is_salutation(words[0], config)
    suffix = is_suffix(words[-1], config)

    # the name body sits between the salutation and the suffix
    start = 1 if salutation else 0
    end = len(words) - 1 if suffix else len(words)
    if start >= end:
        record = NameRecord(salutation=salutation, suffix=suffix)
        logger.debug("parsed %r -> %r", full_name, record)
        return record

    first_names: list[str] = []
    initials: list[str] = []
    last_names: list[str] = []

    # a leading initial is the first name only when another initial follows:
    # "R. Jason Smith" goes by Jason, "R. J. Smith" goes by R.
    word = words[start]
    if is_initial(word, config):
        if start + 1 >= end or is_initial(words[start + 1], config):
            first_names.append(format_initial(word, config))
        else:
            initials.append(format_initial(word, config))
    else:
        first_names.append(fix_case(word))

    # markers are not checked on the first word so "Von Fabella" keeps Von as a first name
    i = start + 1
    while i < end - 1:
        word = words[i]
        if is_compound_last_name(word, config):
            break
        if is_initial(word, config):
            initials.append(format_initial(word, config))
        else:
            first_names.append(fix_case(word))
        i += 1

    if end - start > 1:
        last_names = [fix_case(word) for word in words[i:end]]

    record = NameRecord(
        salutation=salutation,
        first_name=" ".join(first_names),
        middle_initials=" ".join(initials),
        last_name=" ".join(last_names),
        suffix=suffix,
    )
    logger.debug("parsed %r -> %r", full_name, record)
    return record


def parse_many(
    full_names: Iterable[str],
    config: ParserConfiguration = DEFAULT_CONFIGURATION,
) -> list[NameRecord]:
    return [parse(full_name, config) for full_name in full_names]
