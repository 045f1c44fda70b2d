"""Bundled principal sponsor list, served when the sponsor sheet is unreachable."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StaticSponsorEntry:
    name: str
    spouse: str | None = None


PRINCIPAL_SPONSORS: tuple[StaticSponsorEntry, ...] = (
    StaticSponsorEntry(name="Mr. Juan Dela Cruz", spouse="Mrs. Maria Dela Cruz"),
    StaticSponsorEntry(name="Honorable Ramon Villanueva", spouse="Mrs. Teresita Villanueva"),
    StaticSponsorEntry(name="Engr. Pedro Santos", spouse="Mrs. Luz Santos"),
    StaticSponsorEntry(name="Mr. Antonio Garcia", spouse="Mrs. Rosario Garcia"),
    StaticSponsorEntry(name="Dr. Eduardo Mendoza", spouse="Dr. Carmela Mendoza"),
    StaticSponsorEntry(name="Mr. Roberto Aquino", spouse="Mrs. Josefina Aquino"),
    StaticSponsorEntry(name="Mrs. Ana Reyes"),
    StaticSponsorEntry(name="Ms. Corazon Bautista"),
    StaticSponsorEntry(name="Mrs. Leonora Castillo"),
    StaticSponsorEntry(name="Engr. Manuel Ramos"),
)
