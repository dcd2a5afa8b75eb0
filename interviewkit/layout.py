"""Fix text typed on a Latin keyboard layout that was meant to be Russian."""

_LATIN = "qwertyuiop[]asdfghjkl;'zxcvbnm,." 'QWERTYUIOP{}ASDFGHJKL:"ZXCVBNM<>'
_CYRILLIC = "йцукенгшщзхъфывапролджэячсмитьбю" "ЙЦУКЕНГШЩЗХЪФЫВАПРОЛДЖЭЯЧСМИТЬБЮ"

SUBSTITUTE: dict[str, str] = dict(zip(_LATIN, _CYRILLIC))

_TABLE = str.maketrans(SUBSTITUTE)


def fix_text(text: str) -> str:
    """Map each Latin key to the Cyrillic letter on the same key of a ЙЦУКЕН layout.

    Characters without a mapping are left unchanged.
    """
    return text.translate(_TABLE)