import unittest

from layout import compute_layout, hit_option


class LayoutTests(unittest.TestCase):
    def setUp(self):
        self.layout = compute_layout(1000, 800)

    def test_option_geometry(self):
        first, second = self.layout.options[:2]
        self.assertEqual(len(self.layout.options), 4)
        self.assertAlmostEqual(first.x, 50)
        self.assertAlmostEqual(first.y, 200)
        self.assertAlmostEqual(first.w, 900)
        self.assertAlmostEqual(first.h, 80)
        self.assertAlmostEqual(second.y, 296)

    def test_hit_testing(self):
        self.assertEqual(hit_option(self.layout, 60, 210), 0)
        self.assertEqual(hit_option(self.layout, 60, 300), 1)
        self.assertIsNone(hit_option(self.layout, 60, 288))
        self.assertIsNone(hit_option(self.layout, 10, 210))

    def test_buttons(self):
        self.assertTrue(self.layout.next_button.contains(900, 740))
        r = self.layout.restart_button
        self.assertTrue(r.contains(r.x + 1, r.y + 1))
        self.assertFalse(self.layout.export_button.contains(r.x + 1, r.y + 1))

    def test_resize_recomputes(self):
        small = compute_layout(500, 400)
        self.assertAlmostEqual(small.options[0].w, 450)
        self.assertEqual(hit_option(small, 60, 210), 2)
