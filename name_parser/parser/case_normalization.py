import re


_UPPER_RE = re.compile(r"[A-Z]+")
_LOWER_RE = re.compile(r"[a-z]+")


def is_camel_case(word: str) -> bool:
    """Mixed case words like "AliBayat"; False when the word is all one case."""
    return bool(_UPPER_RE.search(word) and _LOWER_RE.search(word))


def safe_uc_first(separator: str, word: str) -> str:
    """Upper-case the first letter of each piece of ``word`` split on ``separator``.

    Mixed case pieces are left alone.
    """
    if not word.strip():
        return word

    pieces = []
    for piece in word.split(separator):
        if is_camel_case(piece):
            pieces.append(piece)
        else:
            pieces.append(piece[:1].upper() + piece[1:].lower())
    return separator.join(pieces)


def fix_case(word: str) -> str:
    # dashes first ("ali-bayat"), then periods ("a.b.")
    word = safe_uc_first("-", word)
    word = safe_uc_first(".", word)
    return word
