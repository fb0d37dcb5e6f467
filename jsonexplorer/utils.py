# (vertical line, line box, line corner)
STYLES = {
    "ascii": ("|", "|-- ", "+-- "),
    "ascii-ex": ("│", "├── ", "└── "),
    "ascii-exr": ("│", "├── ", "╰── "),
    "ascii-em": ("║", "╠══ ", "╚══ "),
    "ascii-emv": ("║", "╟── ", "╙── "),
    "ascii-emh": ("│", "╞══ ", "╘══ "),
}

ELLIPSIS = "..."


def truncate(text: str, max_length: int, marker: str = ELLIPSIS) -> str:
    """Cut `text` to `max_length` characters, appending `marker` if anything was cut.

    >>> truncate("abcdef", 3)
    'abc...'
    """
    if len(text) > max_length:
        return text[:max_length] + marker
    return text
