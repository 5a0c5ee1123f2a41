import unittest
import os
import sys
import tempfile
from datetime import date
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from journal_insights.services.journal_loader import read_journal_entries, split_front_matter


class TestSplitFrontMatter(unittest.TestCase):

    def test_with_front_matter(self):
        attributes, body = split_front_matter("---\ndate: 2024-05-01\nmood: ok\n---\nHello there\n")
        self.assertEqual(attributes, {"date": date(2024, 5, 1), "mood": "ok"})
        self.assertEqual(body, "Hello there\n")

    def test_without_front_matter(self):
        self.assertEqual(split_front_matter("Just text"), ({}, "Just text"))

    def test_non_mapping_front_matter(self):
        with self.assertRaises(ValueError):
            split_front_matter("---\n- a\n- b\n---\nbody")


class TestReadJournalEntries(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.journal = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name, content):
        (self.journal / name).write_text(content, encoding="utf-8")

    def test_reads_valid_entries_in_name_order(self):
        self._write("2024-05-02.md", "---\ndate: 2024-05-02\n---\nFelt anxious about deadline\n")
        self._write("2024-05-01.md", "---\ndate: '2024-05-01'\n---\n\nSpent $50 on groceries\n")

        entries = read_journal_entries(self.journal)

        self.assertEqual([e.text for e in entries], ["Spent $50 on groceries", "Felt anxious about deadline"])
        self.assertEqual(entries[0].date, date(2024, 5, 1))
        self.assertTrue(all(e.embedding is None for e in entries))

    def test_skips_missing_date_and_empty_text(self):
        self._write("a.md", "---\ntitle: no date\n---\nSome text")
        self._write("b.md", "---\ndate: 2024-05-03\n---\n   \n")
        self._write("c.md", "No front matter at all")
        self._write("d.md", "---\ndate: not-a-date\n---\nText")

        self.assertEqual(read_journal_entries(self.journal), [])

    def test_skips_malformed_yaml_and_non_markdown(self):
        self._write("bad.md", "---\ndate: [unclosed\n---\nText")
        self._write("notes.txt", "---\ndate: 2024-05-03\n---\nText")
        self._write("good.md", "---\ndate: 2024-05-04 08:30:00\n---\nMorning run")

        entries = read_journal_entries(self.journal)

        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].date, date(2024, 5, 4))

    def test_byte_order_mark_is_ignored(self):
        (self.journal / "bom.md").write_bytes("\ufeff---\ndate: 2024-01-01\n---\nWent for a run.\n".encode("utf-8"))

        entries = read_journal_entries(self.journal)

        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].date, date(2024, 1, 1))
        self.assertEqual(entries[0].text, "Went for a run.")

    def test_missing_directory(self):
        self.assertEqual(read_journal_entries(self.journal / "nope"), [])


if __name__ == '__main__':
    unittest.main()
