"""Helpers for keeping secrets out of log output."""


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret, keeping only its last few characters.

    Args:
        value: The secret (token, password, header value)
        keep_chars: Number of trailing characters left visible

    Returns:
        The masked value, or "Not Provided" when empty
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return "*" * (len(value) - keep_chars) + value[-keep_chars:]
