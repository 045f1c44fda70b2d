"""
Turn the bundled sponsor list into the shape the sponsor sheet returns.

The bundled list stores a display name plus an optional spouse, while the
sheet stores male/female columns. Titles in the display name decide which
column a lone name lands in. The matching is plain substring matching on
the lower-cased name, so "Mrs." also matches "mr" and names such as
"Dr." or "Atty." carry no signal at all; callers get the baseline split.
"""

from collections.abc import Iterable

from src.sponsors.content import PRINCIPAL_SPONSORS, StaticSponsorEntry
from src.sponsors.schema import PrincipalSponsor

FEMALE_MARKERS = ("mrs", "ms")
MALE_MARKERS = ("mr", "engr", "honorable")


def to_principal_sponsor(entry: StaticSponsorEntry) -> PrincipalSponsor:
    is_female_only = entry.spouse is None or entry.spouse == ""
    lowered = entry.name.lower()
    female_looks_like = any(marker in lowered for marker in FEMALE_MARKERS)
    male_looks_like = any(marker in lowered for marker in MALE_MARKERS)

    if is_female_only:
        male, female = "", entry.name
    else:
        male, female = entry.name, entry.spouse or ""

    return PrincipalSponsor(
        MalePrincipalSponsor=entry.name if male_looks_like and not female_looks_like else male,
        FemalePrincipalSponsor=entry.name if female_looks_like and is_female_only else female,
    )


def fallback_sponsors(
    entries: Iterable[StaticSponsorEntry] = PRINCIPAL_SPONSORS,
) -> list[PrincipalSponsor]:
    """One record per entry, in the order given."""
    return [to_principal_sponsor(entry) for entry in entries]
