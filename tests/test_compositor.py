import unittest

from PIL import Image

from emojify.compositor import emoji_position, emoji_size, overlay
from emojify.models import BoundingBox, FaceSignals

BLUE = (0, 0, 255)
RED = (255, 0, 0)


def face_at(x, y, w, h):
    return FaceSignals(0.9, 0.9, 0.9, BoundingBox(x, y, w, h))


class TestCompositor(unittest.TestCase):
    """Emoji scaling, placement and drawing"""

    def setUp(self):
        self.base = Image.new("RGB", (200, 200), BLUE)
        self.emoji = Image.new("RGB", (64, 64), RED)
        self.face = face_at(10, 20, 100, 100)

    def test_size_applies_scale_factor_twice_to_height(self):
        self.assertEqual(emoji_size(self.emoji, self.face), (80, 64))
        wide = Image.new("RGB", (100, 50), RED)
        self.assertEqual(emoji_size(wide, face_at(0, 0, 50, 50)), (40, 16))

    def test_position_centres_horizontally_and_raises_by_a_third(self):
        self.assertEqual(emoji_position((80, 64), self.face), (20, 49))

    def test_emoji_drawn_at_computed_rectangle(self):
        out = overlay(self.base, self.emoji, self.face)
        self.assertEqual(out.getpixel((20, 49)), RED)
        self.assertEqual(out.getpixel((99, 112)), RED)
        self.assertEqual(out.getpixel((19, 49)), BLUE)
        self.assertEqual(out.getpixel((100, 49)), BLUE)
        self.assertEqual(out.getpixel((20, 48)), BLUE)
        self.assertEqual(out.getpixel((20, 113)), BLUE)

    def test_output_keeps_base_size_and_mode(self):
        for emoji_dims in [(8, 8), (64, 64), (500, 120), (30, 400)]:
            emoji = Image.new("RGB", emoji_dims, RED)
            out = overlay(self.base, emoji, self.face)
            self.assertEqual(out.size, self.base.size)
            self.assertEqual(out.mode, self.base.mode)

        gray = Image.new("L", (120, 90), 10)
        out = overlay(gray, self.emoji, face_at(0, 0, 60, 60))
        self.assertEqual((out.size, out.mode), (gray.size, "L"))

    def test_base_is_not_mutated(self):
        before = self.base.tobytes()
        out = overlay(self.base, self.emoji, self.face)
        self.assertIsNot(out, self.base)
        self.assertEqual(self.base.tobytes(), before)

    def test_deterministic(self):
        first = overlay(self.base, self.emoji, self.face)
        second = overlay(self.base, self.emoji, self.face)
        self.assertEqual(first.tobytes(), second.tobytes())

    def test_out_of_bounds_is_clipped(self):
        small = Image.new("RGB", (60, 60), BLUE)
        out = overlay(small, self.emoji, face_at(-50, -50, 100, 100))
        self.assertEqual(out.size, (60, 60))
        self.assertEqual(out.getpixel((0, 0)), RED)

        out = overlay(small, self.emoji, face_at(500, 500, 100, 100))
        self.assertEqual(out.tobytes(), small.tobytes())

    def test_transparent_pixels_keep_background(self):
        emoji = Image.new("RGBA", (10, 10), (0, 0, 0, 0))
        for x in range(5):
            for y in range(10):
                emoji.putpixel((x, y), RED + (255,))
        # 10x8 emoji placed at (1, 4)
        out = overlay(self.base, emoji, face_at(0, 0, 12.5, 12.5))
        self.assertEqual(out.getpixel((1, 4)), RED)
        self.assertEqual(out.getpixel((10, 4)), BLUE)

    def test_tiny_face_is_a_no_op(self):
        out = overlay(self.base, self.emoji, face_at(50, 50, 1, 1))
        self.assertIsNot(out, self.base)
        self.assertEqual(out.tobytes(), self.base.tobytes())

    def test_palette_base_keeps_its_colours(self):
        base = Image.new("P", (100, 100), 0)
        base.putpalette([0, 128, 0] + [0, 0, 0] * 255)
        out = overlay(base, self.emoji, face_at(0, 0, 20, 20))
        self.assertEqual(out.size, (100, 100))
        self.assertEqual(out.convert("RGB").getpixel((90, 90)), (0, 128, 0))
        self.assertEqual(out.convert("RGB").getpixel((5, 10)), RED)
        self.assertEqual(base.mode, "P")

    def test_palette_emoji_transparency_is_honoured(self):
        emoji = Image.new("P", (10, 10), 1)
        emoji.putpalette([255, 0, 0] + [0, 0, 0] * 255)
        for x in range(5):
            for y in range(10):
                emoji.putpixel((x, y), 0)
        emoji.info["transparency"] = 1
        # 10x8 emoji placed at (1, 4)
        out = overlay(self.base, emoji, face_at(0, 0, 12.5, 12.5))
        self.assertEqual(out.getpixel((1, 4)), RED)
        self.assertEqual(out.getpixel((10, 4)), BLUE)


if __name__ == "__main__":
    unittest.main()
