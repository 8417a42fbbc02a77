"""Word-aware case conversion for application names."""


def _is_boundary(prev: str, char: str, following: str) -> bool:
    """True if a new word starts at ``char``."""
    if prev.isdigit() != char.isdigit():
        return True
    if prev.islower() and char.isupper():
        return True
    # Last capital of an acronym starts the next word: HTTP|Server
    return prev.isupper() and char.isupper() and following.islower()


def split_words(name: str) -> list:
    """
    Split an application name into words.

    Anything that is not a letter or digit (``-``, ``_``, spaces, dots) is a
    separator and is dropped. Words also break on lower-to-upper transitions,
    acronym boundaries and letter/digit boundaries:
    ``"myHTTPServer2"`` -> ``["my", "HTTP", "Server", "2"]``.
    Letters outside ASCII are kept: ``"café-app"`` -> ``["café", "app"]``.
    """
    words = []
    current = ""
    for i, char in enumerate(name):
        if not char.isalnum():
            if current:
                words.append(current)
            current = ""
            continue
        following = name[i + 1] if i + 1 < len(name) else ""
        if current and _is_boundary(current[-1], char, following):
            words.append(current)
            current = ""
        current += char
    if current:
        words.append(current)
    return words


def screaming_snake_case(name: str) -> str:
    """Convert ``name`` to SCREAMING_SNAKE_CASE (``"my-app"`` -> ``"MY_APP"``)."""
    return "_".join(word.upper() for word in split_words(name))
