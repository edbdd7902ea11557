"""Module: catalog."""

# Selectable medication names offered when building a prescription.
# Order matters: the QR payload lists letters in the order they first appear here.
MEDICATION_CATALOG: tuple[str, ...] = (
    "Aspirin",
    "Paracetamol",
    "Naproxen",
    "Metoprolol",
    "Dolo",
)


def medication_options() -> list[dict[str, str]]:
    return [{"value": name, "label": name} for name in MEDICATION_CATALOG]


def catalog_letters(catalog: tuple[str, ...] = MEDICATION_CATALOG) -> tuple[str, ...]:
    """Ordered, de-duplicated upper-case leading letters of the catalog names."""
    letters: list[str] = []
    for name in catalog:
        cleaned = name.strip()
        if not cleaned:
            continue
        letter = cleaned[0].upper()
        if letter not in letters:
            letters.append(letter)
    return tuple(letters)
