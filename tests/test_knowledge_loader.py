import json
import tempfile
import unittest
from pathlib import Path

from application.services.corpus_builder import build_corpus
from infrastructure.knowledge.json_knowledge_loader import KnowledgeLoadError, load_knowledge_record


class TestLoadKnowledgeRecord(unittest.TestCase):
    def test_bundled_record(self):
        record = load_knowledge_record()
        self.assertEqual(record.brand.name, "Mafi Restaurant")
        self.assertTrue(record.services.catering.available)
        self.assertEqual(record.services.meeting_halls.capacity.large_hall, 120)

    def test_partial_record(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "record.json"
            path.write_text(json.dumps({"brand": {"name": "Pop-up"}, "faqs": []}), encoding="utf-8")
            record = load_knowledge_record(path)
            self.assertEqual(record.brand.name, "Pop-up")
            self.assertIsNone(record.location)
            self.assertIsNone(record.services.catering)
            self.assertEqual(record.menu.signature, [])

    def test_camel_case_record(self):
        data = {
            "brand": {"name": "Mafi", "shortDescription": "family grill"},
            "location": {"address": "Lakeside", "mapUrl": "https://maps.example/mafi"},
            "services": {
                "reservations": {"howToBook": "call us", "emailTemplateHint": "name, date, guests"},
                "meetingHalls": {
                    "summary": "Two halls",
                    "bookingNotes": ["Deposit required"],
                    "capacity": {"largeHall": 150, "smallHallEach": 30, "totalSmallHalls": 3},
                },
            },
        }
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "record.json"
            path.write_text(json.dumps(data), encoding="utf-8")
            record = load_knowledge_record(path)

        self.assertEqual(record.brand.short_description, "family grill")
        self.assertEqual(record.location.map_url, "https://maps.example/mafi")
        self.assertEqual(record.services.reservations.how_to_book, "call us")
        self.assertEqual(record.services.reservations.email_template_hint, "name, date, guests")
        halls = record.services.meeting_halls
        self.assertEqual(halls.booking_notes, ["Deposit required"])
        self.assertEqual((halls.capacity.large_hall, halls.capacity.small_hall_each), (150, 30))

        texts = {doc.id: doc.text for doc in build_corpus(record)}
        self.assertIn("family grill", texts["brand"])
        self.assertIn("large hall 150 guests", texts["services-meetingHalls"])

    def test_missing_file(self):
        with self.assertRaises(KnowledgeLoadError):
            load_knowledge_record("/tmp/concierge-does-not-exist.json")

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "record.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(KnowledgeLoadError):
                load_knowledge_record(path)

    def test_schema_violation(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "record.json"
            path.write_text(json.dumps({"location": {"address": "Lakeside"}}), encoding="utf-8")
            with self.assertRaises(KnowledgeLoadError):
                load_knowledge_record(path)


if __name__ == "__main__":
    unittest.main()
