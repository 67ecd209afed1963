from typing import Optional

# Positional tables: DIACRITICS[i] folds to PLAIN_ASCII[i].
DIACRITICS = "ÀàÈèÌìÒòÙùÁáÉéÍíÓóÚúÝýÂâÊêÎîÔôÛûŶŷÃãÕõÑñÄäËëÏïÖöÜüŸÿÅåÇçŐőŰű"
PLAIN_ASCII = "AaEeIiOoUuAaEeIiOoUuYyAaEeIiOoUuYyAaOoNnAaEeIiOoUuYyAaCcOoUu"

_FOLD_TABLE = str.maketrans(DIACRITICS, PLAIN_ASCII)


def fold_diacritics(text: Optional[str]) -> Optional[str]:
    """
    Replace every character found in DIACRITICS with its plain ASCII twin.
    Characters outside the table are kept as-is. None stays None.
    """
    if text is None:
        return None
    return text.translate(_FOLD_TABLE)


def to_comparable_form(text: Optional[str]) -> Optional[str]:
    """Diacritic-fold then lowercase. Apply to both sides of a comparison."""
    folded = fold_diacritics(text)
    return folded.lower() if folded is not None else None
