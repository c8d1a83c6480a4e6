import json
import os
import tempfile
import unittest

from question_bank import build_bank, load_bank, load_rows_from_csv


class QuestionBankTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, name, text):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return path

    def test_csv_with_header(self):
        path = self.write("q.csv", (
            "question,A,B,C,D,answer,feedback\n"
            '"Capital of France?",Paris,Rome,Oslo,Bern,A,"Yes, Paris."\n'
            "Two plus two?,3,4,5,6,2,\n"
        ))
        bank = load_bank(path)
        self.assertEqual(len(bank), 2)
        self.assertEqual(bank[0].question, "Capital of France?")
        self.assertEqual(bank[0].choices, ("Paris", "Rome", "Oslo", "Bern"))
        self.assertEqual(bank[0].correct_index, 0)
        self.assertEqual(bank[0].feedback, "Yes, Paris.")
        self.assertEqual(bank[1].correct_index, 1)
        self.assertEqual(bank[1].feedback, "")

    def test_missing_cells_and_feedback_column(self):
        path = self.write("q.csv", "question,A,B,C,D,answer\nShort row?,x,y\n")
        rows = load_rows_from_csv(path)
        self.assertEqual(rows[0]["C"], "")
        bank = build_bank(rows)
        self.assertEqual(bank[0].choices, ("x", "y", "", ""))
        self.assertIsNone(bank[0].correct_index)

    def test_positional_fallback_for_unknown_headers(self):
        path = self.write("q.csv", "q,o1,o2,o3,o4,ans\nPick d,a,b,c,d,D\n")
        bank = load_bank(path)
        self.assertEqual(bank[0].question, "Pick d")
        self.assertEqual(bank[0].choices, ("a", "b", "c", "d"))
        self.assertEqual(bank[0].correct_index, 3)

    def test_bad_answer_token_is_kept_unset(self):
        path = self.write("q.csv", "question,A,B,C,D,answer\nOdd one?,a,b,c,d,E\n")
        with self.assertLogs("question_bank", level="WARNING"):
            bank = load_bank(path)
        self.assertEqual(len(bank), 1)
        self.assertIsNone(bank[0].correct_index)

    def test_blank_questions_skipped(self):
        bank = build_bank([{"question": "  ", "answer": "A"}, {"question": "Real?", "answer": "1"}])
        self.assertEqual([q.question for q in bank], ["Real?"])

    def test_json_bank(self):
        path = self.write("q.json", json.dumps([
            {"question": "JSON?", "A": "yes", "B": "no", "answer": "a", "feedback": "ok"},
        ]))
        bank = load_bank(path)
        self.assertEqual(len(bank), 1)
        self.assertEqual(bank[0].correct_index, 0)

    def test_fallbacks(self):
        cases = [
            os.path.join(self.tmp.name, "missing.csv"),
            self.write("empty.csv", "question,A,B,C,D,answer\n"),
            self.write("bad.json", "{not json"),
            self.write("notes.txt", "hello"),
        ]
        for path in cases:
            with self.assertLogs("question_bank", level="WARNING"):
                bank = load_bank(path)
            self.assertEqual(len(bank), 6, path)
        self.assertEqual(len(load_bank(None)), 6)


if __name__ == "__main__":
    unittest.main()
