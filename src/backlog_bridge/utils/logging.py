"""Helpers for keeping secrets out of log output."""


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks a secret, keeping only a few trailing characters visible.

    Args:
        value: The secret to mask
        keep_chars: Number of trailing characters to keep visible

    Returns:
        The masked value, or "Not Provided" when there is nothing to mask
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return "*" * (len(value) - keep_chars) + value[-keep_chars:]
