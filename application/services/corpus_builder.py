"""Flatten the knowledge record into short documents for lexical retrieval."""
from __future__ import annotations

from domain.entities import Document
from domain.knowledge import KnowledgeRecord


def build_corpus(record: KnowledgeRecord) -> list[Document]:
    """Return one document per logical fact group of the record.

    Each document reads as a standalone sentence so a single hit can answer a
    question. Optional blocks that are absent from the record are skipped.
    """

    docs: list[Document] = []
    brand = record.brand
    docs.append(Document("brand", "Brand", _sentences(brand.name, brand.tagline, brand.short_description)))

    location = record.location
    if location is not None:
        text = f"Address: {location.address}"
        if location.landmarks:
            text += f". Landmarks: {', '.join(location.landmarks)}"
        docs.append(Document("location", "Location", text))
        if location.map_url:
            docs.append(Document("map", "Map", f"Map: {location.map_url}"))

    contact = record.contact
    if contact is not None:
        social = contact.social
        channels = [
            ("Phone", contact.phone),
            ("Email", contact.email),
            ("Website", contact.website),
            ("Facebook", social.facebook if social else None),
            ("Instagram", social.instagram if social else None),
            ("TikTok", social.tiktok if social else None),
        ]
        text = _sentences(*(f"{label}: {value}" for label, value in channels if value))
        if text:
            docs.append(Document("contact", "Contact", text))

    if record.hours:
        slots = " | ".join(f"{slot.days} {slot.open}–{slot.close}" for slot in record.hours)
        docs.append(Document("hours", "Hours", f"Opening hours: {slots}"))

    docs.extend(_service_documents(record))
    docs.extend(_menu_documents(record))

    policies = record.policies
    if policies.booking:
        docs.append(Document("policies-booking", "Policies · Booking", " ".join(policies.booking)))
    if policies.allergens:
        docs.append(Document("policies-allergens", "Policies · Allergens", " ".join(policies.allergens)))

    for idx, faq in enumerate(record.faqs):
        docs.append(Document(f"faq-{idx}", "FAQ", f"Q: {faq.q} A: {faq.a}"))

    if record.developers:
        credits = ", ".join(f"{dev.name} ({dev.role})" if dev.role else dev.name for dev in record.developers)
        docs.append(Document("developers", "Developers", f"Site developers: {credits}"))

    return docs


def _service_documents(record: KnowledgeRecord) -> list[Document]:
    services = record.services
    docs: list[Document] = []

    if services.reservations is not None:
        res = services.reservations
        docs.append(
            Document(
                "services-reservations",
                "Reservations",
                f"Reservations: {_sentences(res.how_to_book, res.email_template_hint)}",
            )
        )

    halls = services.meeting_halls
    if halls is not None:
        parts = [f"Meeting halls: {halls.summary}"]
        if halls.amenities:
            parts.append(f"Amenities: {', '.join(halls.amenities)}")
        if halls.booking_notes:
            parts.append(f"Notes: {'; '.join(halls.booking_notes)}")
        if halls.capacity is not None:
            cap = halls.capacity
            parts.append(
                f"Capacity: large hall {cap.large_hall} guests, small halls "
                f"{cap.small_hall_each} guests each (x{cap.total_small_halls})."
            )
        docs.append(Document("services-meetingHalls", "Meeting Halls", ". ".join(parts)))

    if services.catering is not None and services.catering.available:
        docs.append(Document("services-catering", "Catering", _sentences("Catering available", services.catering.notes)))

    if services.delivery is not None:
        delivery = services.delivery
        answer = "Yes" if delivery.available else "No"
        docs.append(Document("services-delivery", "Delivery", _sentences(f"Delivery available: {answer}", delivery.notes)))

    return docs


def _menu_documents(record: KnowledgeRecord) -> list[Document]:
    menu = record.menu
    docs = [
        Document(f"menu-signature-{idx}", "Menu · Signature", f"{item.title}: {item.description}" if item.description else item.title)
        for idx, item in enumerate(menu.signature)
    ]
    if menu.signature:
        titles = ", ".join(item.title for item in menu.signature)
        docs.append(Document("menu-all", "Menu", f"Signature menu items: {titles}"))
    if menu.notes:
        docs.append(Document("menu-notes", "Menu · Notes", " ".join(menu.notes)))
    return docs


def _sentences(*parts: str) -> str:
    return ". ".join(part for part in parts if part)


__all__ = ["build_corpus"]
