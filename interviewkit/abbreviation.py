"""Numeronym abbreviations such as ``kubernetes`` -> ``k8s``."""


class Abbreviator(str):
    """A string whose text form is its numeronym.

    Strings of two characters or fewer are shown unchanged.
    """

    def __str__(self) -> str:
        raw = str.__str__(self)
        if len(raw) <= 2:
            return raw
        return f"{raw[0]}{len(raw) - 2}{raw[-1]}"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


def abbreviate(text: str) -> str:
    """Return the numeronym of ``text``."""
    return str(Abbreviator(text))