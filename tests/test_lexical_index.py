import math
import unittest

from application.services.corpus_builder import build_corpus
from application.services.lexical_index import LexicalIndex
from domain.entities import Document
from infrastructure.knowledge.json_knowledge_loader import load_knowledge_record


class TestLexicalIndex(unittest.TestCase):
    def setUp(self) -> None:
        self.index = LexicalIndex.build(build_corpus(load_knowledge_record()))

    def _doc_freq(self, term: str) -> int:
        return sum(1 for doc in self.index.documents if term in doc.normalized_text)

    def test_derived_fields_follow_text(self):
        doc = next(doc for doc in self.index.documents if doc.id == "hours")
        self.assertEqual(doc.normalized_text, "opening hours monday friday 08 00 22 00 saturday sunday 09 00 23 00")
        self.assertEqual(doc.normalized_section, "hours")
        self.assertIn("opening", doc.tokens)

    def test_idf_formula(self):
        n = len(self.index)
        df = self._doc_freq("tilapia")
        self.assertAlmostEqual(self.index.idf("tilapia"), math.log((n + 1) / (df + 1)) + 1)

    def test_idf_positive_and_monotone(self):
        table = self.index.idf_table
        self.assertTrue(table)
        for weight in table.values():
            self.assertGreater(weight, 0)
        freqs = {token: self._doc_freq(token) for token in table}
        tokens = sorted(table, key=freqs.get)
        rare, common = tokens[0], tokens[-1]
        self.assertLess(freqs[rare], freqs[common])
        self.assertGreater(table[rare], table[common])

    def test_terms_outside_vocabulary(self):
        self.assertNotIn("chick", self.index.idf_table)
        df = self._doc_freq("chick")
        self.assertGreater(df, 0)
        self.assertAlmostEqual(self.index.idf("chick"), math.log((len(self.index) + 1) / (df + 1)) + 1)
        self.assertNotIn("chick", self.index.idf_table)
        self.assertEqual(self.index.idf("zzzz"), math.log(len(self.index) + 1) + 1)

    def test_duplicate_ids_are_rejected(self):
        with self.assertRaises(ValueError):
            LexicalIndex.build([Document("a", "FAQ", "one"), Document("a", "FAQ", "two")])

    def test_empty_corpus(self):
        index = LexicalIndex.build([])
        self.assertEqual(len(index), 0)
        self.assertEqual(index.idf("menu"), 1.0)


if __name__ == "__main__":
    unittest.main()
