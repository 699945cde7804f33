"""Query expander backed by hand-curated restaurant synonym groups."""
from __future__ import annotations

from typing import Iterable, Sequence

from domain.interfaces import QueryExpander

SYNONYM_GROUPS: tuple[tuple[str, ...], ...] = (
    # bookings
    ("book", "booking", "bookings", "reserve", "reserved", "reservation", "reservations"),
    # meeting halls and venues
    ("meeting", "meetings", "hall", "halls", "venue", "event", "events", "conference", "party"),
    # menu and food
    ("menu", "dish", "dishes", "food", "meal", "meals", "signature", "specials"),
    # opening hours
    ("hours", "hour", "time", "times", "open", "opening", "opens", "close", "closing", "closed", "schedule"),
    # location and directions
    ("location", "where", "address", "map", "directions", "near", "located", "find"),
    # prices
    ("price", "prices", "cost", "costs", "fee", "fees", "deposit", "charge"),
    # catering
    ("catering", "cater", "buffet", "banquet", "outside"),
    # contact channels
    ("contact", "phone", "email", "call", "reach", "number", "mobile", "website"),
    # social media
    ("social", "facebook", "instagram", "tiktok"),
    # capacity and seating
    ("capacity", "guests", "people", "size", "seats", "seating", "accommodate"),
    # delivery
    ("delivery", "deliver", "takeaway", "takeout", "order"),
    # poultry
    ("chicken", "poultry", "wings"),
    # fish
    ("fish", "seafood", "tilapia"),
    # red meat
    ("beef", "goat", "meat", "steak"),
    # dietary and allergens
    ("vegetarian", "vegan", "allergy", "allergies", "allergen", "allergens", "gluten", "dietary"),
    # site credits
    ("developer", "developers", "built", "made", "designed", "creator"),
)


class SynonymExpander(QueryExpander):
    """Adds every member of each synonym group a query token belongs to.

    Membership is symmetric: a word maps to all other words of each group that
    contains it. The adjacency map is computed once on construction.
    """

    def __init__(self, groups: Sequence[Iterable[str]] = SYNONYM_GROUPS) -> None:
        adjacency: dict[str, set[str]] = {}
        for group in groups:
            members = {term.lower() for term in group}
            for term in members:
                adjacency.setdefault(term, set()).update(members - {term})
        self._adjacency = {term: frozenset(synonyms) for term, synonyms in adjacency.items()}

    def synonyms(self, term: str) -> frozenset[str]:
        return self._adjacency.get(term, frozenset())

    def expand(self, tokens: Iterable[str]) -> set[str]:
        expanded: set[str] = set()
        for token in tokens:
            expanded.add(token)
            expanded.update(self.synonyms(token))
        return expanded


__all__ = ["SYNONYM_GROUPS", "SynonymExpander"]
