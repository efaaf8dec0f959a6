"""String padding helper."""


def pad_to_len(text: str, length: int) -> str:
    """Pad ``text`` with spaces to ``length`` characters.

    Text that is already at least that long is returned unchanged.
    """
    return text + " " * max(0, length - len(text))