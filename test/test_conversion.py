import unittest

from termstyle.color.conversion import (
    hsl_to_rgb, hsv_to_rgb, rgb_to_hsl, rgb_to_hsv, round_half_up
)
from termstyle.color.lores import (
    ansi256_to_rgb,
    closest_ansi256,
    is_ansi,
    is_cube,
    is_gray,
    rgb_to_ansi256,
    rgb_to_basic,
)
from termstyle.color.spec import HslColor, HsvColor


class TestConversion(unittest.TestCase):

    def test_round_half_up(self) -> None:
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(1.5), 2)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.49), 2)

    def test_rgb_to_hsl(self) -> None:
        for rgb, hsl in [
            ((255, 0, 0), HslColor(0, 100, 50)),
            ((0, 255, 0), HslColor(120, 100, 50)),
            ((0, 0, 255), HslColor(240, 100, 50)),
            ((255, 0, 255), HslColor(300, 100, 50)),
            ((0, 0, 0), HslColor(0, 0, 0)),
            ((255, 255, 255), HslColor(0, 0, 100)),
            ((128, 128, 128), HslColor(0, 0, 50)),
        ]:
            with self.subTest(rgb=rgb):
                self.assertEqual(rgb_to_hsl(*rgb), hsl)

    def test_hsl_to_rgb(self) -> None:
        self.assertEqual(hsl_to_rgb(HslColor(0, 100, 50)), (255, 0, 0))
        self.assertEqual(hsl_to_rgb(HslColor(480, 150, 50)), (0, 255, 0))
        self.assertEqual(hsl_to_rgb(HslColor(-120, 100, 50)), (0, 0, 255))
        self.assertEqual(hsl_to_rgb(HslColor(0, 0, 50)), (128, 128, 128))
        self.assertEqual(hsl_to_rgb(HslColor(0, 0, -10)), (0, 0, 0))

    def test_round_trip(self) -> None:
        for rgb in [
            (255, 0, 0),
            (0, 255, 0),
            (0, 0, 255),
            (255, 255, 0),
            (0, 255, 255),
            (255, 0, 255),
            (255, 128, 0),
            (0, 0, 0),
            (128, 128, 128),
            (255, 255, 255),
        ]:
            with self.subTest(rgb=rgb):
                actual = hsl_to_rgb(rgb_to_hsl(*rgb))
                for c1, c2 in zip(rgb, actual):
                    self.assertLessEqual(abs(c1 - c2), 1)

    def test_unrounded_round_trip(self) -> None:
        worst = 0
        worst_rgb = None
        for r in range(0, 256, 3):
            for g in range(0, 256, 5):
                for b in range(0, 256, 7):
                    actual = hsl_to_rgb(rgb_to_hsl(r, g, b, rounded=False))
                    error = max(abs(c1 - c2) for c1, c2 in zip((r, g, b), actual))
                    if error > worst:
                        worst, worst_rgb = error, (r, g, b)
        self.assertLessEqual(worst, 1, f'worst color {worst_rgb}')

        for rgb in [(33, 250, 42), (255, 255, 255), (1, 0, 0), (254, 255, 255)]:
            with self.subTest(rgb=rgb):
                actual = hsl_to_rgb(rgb_to_hsl(*rgb, rounded=False))
                for c1, c2 in zip(rgb, actual):
                    self.assertLessEqual(abs(c1 - c2), 1)

    def test_unrounded_hsl(self) -> None:
        hsl = rgb_to_hsl(33, 250, 42, rounded=False)
        self.assertNotEqual(hsl.h, round(hsl.h))
        self.assertEqual(rgb_to_hsl(128, 128, 128, rounded=False).h, 0)
        self.assertAlmostEqual(rgb_to_hsl(128, 128, 128, rounded=False).l, 12800 / 255)

    def test_hsl_of(self) -> None:
        self.assertEqual(HslColor.of(-30, 120, -5), HslColor(330, 100, 0))
        self.assertEqual(HslColor.of(720, 50, 50), HslColor(0, 50, 50))

    def test_hsv(self) -> None:
        self.assertEqual(rgb_to_hsv(255, 0, 0), HsvColor(0, 100, 100))
        self.assertEqual(rgb_to_hsv(0, 0, 0), HsvColor(0, 0, 0))
        self.assertEqual(hsv_to_rgb(HsvColor(120, 100, 100)), (0, 255, 0))
        self.assertEqual(hsv_to_rgb(HsvColor(-60, 100, 100)), (255, 0, 255))
        self.assertEqual(hsv_to_rgb(HsvColor(0, 0, 50)), (128, 128, 128))

        for rgb in [(12, 200, 99), (255, 128, 64), (1, 2, 3), (77, 77, 77)]:
            with self.subTest(rgb=rgb):
                self.assertEqual(hsv_to_rgb(rgb_to_hsv(*rgb)), rgb)


class TestLores(unittest.TestCase):

    def test_rgb_to_ansi256(self) -> None:
        for rgb, index in [
            ((255, 255, 255), 231),
            ((238, 238, 238), 255),
            ((239, 239, 239), 255),
            ((248, 248, 248), 255),
            ((249, 249, 249), 231),
            ((0, 0, 0), 16),
            ((7, 7, 7), 16),
            ((8, 8, 8), 232),
            ((128, 128, 128), 244),
            ((255, 0, 0), 196),
            ((0, 255, 0), 46),
            ((0, 0, 255), 21),
            ((255, 128, 0), 214),
        ]:
            with self.subTest(rgb=rgb):
                self.assertEqual(rgb_to_ansi256(*rgb), index)

    def test_grays_never_overflow(self) -> None:
        for level in range(256):
            with self.subTest(level=level):
                index = rgb_to_ansi256(level, level, level)
                self.assertTrue(index in (16, 231) or 232 <= index <= 255)

    def test_ansi256_to_rgb(self) -> None:
        for index, rgb in [
            (0, (0, 0, 0)),
            (9, (255, 85, 85)),
            (15, (255, 255, 255)),
            (16, (0, 0, 0)),
            (21, (0, 0, 255)),
            (196, (255, 0, 0)),
            (67, (0x5F, 0x87, 0xAF)),
            (231, (255, 255, 255)),
            (232, (8, 8, 8)),
            (255, (238, 238, 238)),
        ]:
            with self.subTest(index=index):
                self.assertEqual(ansi256_to_rgb(index), rgb)

        with self.assertRaises(ValueError):
            ansi256_to_rgb(256)
        with self.assertRaises(ValueError):
            ansi256_to_rgb(-1)

    def test_closest_ansi256(self) -> None:
        self.assertEqual(closest_ansi256(255, 0, 0), 196)
        self.assertEqual(closest_ansi256(0, 0, 0), 16)
        self.assertEqual(closest_ansi256(255, 255, 255), 231)
        self.assertEqual(closest_ansi256(8, 8, 8), 232)
        self.assertEqual(closest_ansi256(250, 5, 5), 196)
        self.assertEqual(closest_ansi256(99, 99, 99), 241)

    def test_rgb_to_basic(self) -> None:
        for rgb, code in [
            ((10, 10, 10), 30),
            ((200, 10, 10), 31),
            ((10, 200, 10), 32),
            ((200, 200, 10), 33),
            ((10, 10, 200), 34),
            ((200, 10, 200), 35),
            ((10, 200, 200), 36),
            ((200, 200, 200), 37),
        ]:
            with self.subTest(rgb=rgb):
                self.assertEqual(rgb_to_basic(*rgb), code)

    def test_predicates(self) -> None:
        self.assertTrue(is_ansi(0) and is_ansi(15))
        self.assertFalse(is_ansi(16))
        self.assertTrue(is_cube(16) and is_cube(231))
        self.assertFalse(is_cube(232))
        self.assertTrue(is_gray(232) and is_gray(255))
        self.assertFalse(is_gray(256))


if __name__ == '__main__':
    unittest.main()
