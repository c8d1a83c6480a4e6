import os
import random
import tempfile
import unittest
from datetime import datetime

from certificate import generate_certificate
from question_bank import fallback_bank
from quiz_engine import QuizEngine


class CertificateTests(unittest.TestCase):
    def test_writes_pdf(self):
        engine = QuizEngine(fallback_bank(), rng=random.Random(11))
        for i, q in enumerate(engine.session.items):
            if i < 4:
                engine.select_answer(q.correct_index)
                engine.advance()
        engine.submit()

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "result.pdf")
            cert_id = generate_certificate("Ada", engine.session.items, engine.result,
                                           datetime(2026, 1, 2, 3, 4), path)
            with open(path, "rb") as f:
                self.assertEqual(f.read(4), b"%PDF")
        self.assertTrue(cert_id.startswith("260102-"))
        self.assertEqual(len(cert_id), len("260102-") + 8)
        self.assertEqual(engine.result.score, 4)
