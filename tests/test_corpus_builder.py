import unittest

from application.services.corpus_builder import build_corpus
from domain.knowledge import KnowledgeRecord
from infrastructure.knowledge.json_knowledge_loader import load_knowledge_record


class TestBuildCorpus(unittest.TestCase):
    def setUp(self) -> None:
        self.record = load_knowledge_record()
        self.docs = build_corpus(self.record)

    def test_ids_are_unique(self):
        ids = [doc.id for doc in self.docs]
        self.assertEqual(len(ids), len(set(ids)))

    def test_one_document_per_fact_group(self):
        ids = {doc.id for doc in self.docs}
        expected = {
            "brand",
            "location",
            "map",
            "contact",
            "hours",
            "services-reservations",
            "services-meetingHalls",
            "services-catering",
            "services-delivery",
            "menu-all",
            "menu-notes",
            "policies-booking",
            "policies-allergens",
            "developers",
        }
        self.assertTrue(expected <= ids)
        menu_items = [doc for doc in self.docs if doc.section == "Menu · Signature"]
        self.assertEqual(len(menu_items), len(self.record.menu.signature))
        faqs = [doc for doc in self.docs if doc.section == "FAQ"]
        self.assertEqual(len(faqs), len(self.record.faqs))

    def test_texts_are_denormalized_sentences(self):
        by_id = {doc.id: doc for doc in self.docs}
        self.assertEqual(
            by_id["hours"].text,
            "Opening hours: Monday–Friday 08:00–22:00 | Saturday–Sunday 09:00–23:00",
        )
        self.assertTrue(by_id["faq-0"].text.startswith("Q: Do you have parking? A: "))
        self.assertIn("Grilled Tilapia", by_id["menu-all"].text)
        self.assertIn("large hall 120 guests", by_id["services-meetingHalls"].text)

    def test_minimal_record_only_has_brand(self):
        record = KnowledgeRecord.model_validate({"brand": {"name": "Mafi Restaurant"}})
        docs = build_corpus(record)
        self.assertEqual([doc.id for doc in docs], ["brand"])
        self.assertEqual(docs[0].text, "Mafi Restaurant")

    def test_optional_services_are_omitted(self):
        record = KnowledgeRecord.model_validate(
            {
                "brand": {"name": "Mafi Restaurant"},
                "location": {"address": "Lakeside Road"},
                "services": {
                    "catering": {"available": False, "notes": "Not yet"},
                    "delivery": {"available": False, "notes": "Pick up only"},
                },
            }
        )
        by_id = {doc.id: doc for doc in build_corpus(record)}
        self.assertNotIn("services-catering", by_id)
        self.assertNotIn("map", by_id)
        self.assertEqual(by_id["location"].text, "Address: Lakeside Road")
        self.assertEqual(by_id["services-delivery"].text, "Delivery available: No. Pick up only")


if __name__ == "__main__":
    unittest.main()
