"""Name normalization for folder and package comparison."""

# Separators unified to a single hyphen, one-for-one.
_SEPARATORS = str.maketrans({" ": "-", "_": "-", ".": "-"})


def normalize(raw: str) -> str:
    """Canonicalize a folder or package name into a comparable token.

    Lower-cases the name and maps each space, underscore, period and
    hyphen to ``-``. No other characters are touched, and runs of
    separators are not collapsed, so the function is idempotent.

    Args:
        raw: Folder basename, package name or app id.

    Returns:
        Normalized name.

    Example:
        >>> normalize("Code - OSS")
        'code---oss'
        >>> normalize("org.gnome.Calculator")
        'org-gnome-calculator'
    """
    return raw.lower().translate(_SEPARATORS)
