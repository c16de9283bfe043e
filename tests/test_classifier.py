import itertools
import unittest

from emojify.classifier import classify
from emojify.models import BoundingBox, EmojiCategory, FaceSignals

SMILING_CATEGORIES = {
    EmojiCategory.SMILE,
    EmojiCategory.LEFT_WINK,
    EmojiCategory.RIGHT_WINK,
    EmojiCategory.CLOSED_EYE_SMILE,
}


def signals(smiling, left, right):
    return FaceSignals(smiling, left, right, BoundingBox(0, 0, 100, 100))


class TestClassifier(unittest.TestCase):
    """Expression -> emoji decision tree"""

    def test_open_eyes_smiling(self):
        self.assertEqual(classify(signals(0.9, 0.9, 0.9)), EmojiCategory.SMILE)

    def test_left_wink(self):
        self.assertEqual(classify(signals(0.9, 0.1, 0.9)), EmojiCategory.LEFT_WINK)

    def test_right_wink(self):
        self.assertEqual(classify(signals(0.9, 0.9, 0.1)), EmojiCategory.RIGHT_WINK)

    def test_closed_eye_smile(self):
        self.assertEqual(classify(signals(0.9, 0.1, 0.1)), EmojiCategory.CLOSED_EYE_SMILE)

    def test_frowning_variants(self):
        self.assertEqual(classify(signals(0.05, 0.9, 0.9)), EmojiCategory.FROWN)
        self.assertEqual(classify(signals(0.05, 0.1, 0.9)), EmojiCategory.LEFT_WINK_FROWN)
        self.assertEqual(classify(signals(0.05, 0.9, 0.1)), EmojiCategory.RIGHT_WINK_FROWN)
        self.assertEqual(classify(signals(0.05, 0.1, 0.1)), EmojiCategory.CLOSED_EYE_FROWN)

    def test_thresholds_are_strict(self):
        # 0.15 is not smiling, 0.5 is open
        self.assertEqual(classify(signals(0.15, 0.5, 0.9)), EmojiCategory.FROWN)
        self.assertEqual(classify(signals(0.15, 0.5, 0.5)), EmojiCategory.FROWN)
        self.assertEqual(classify(signals(0.1500001, 0.5, 0.4999)), EmojiCategory.RIGHT_WINK)

    def test_not_smiling_never_gives_smiling_category(self):
        values = [-1.0, 0.0, 0.1, 0.15, 0.49, 0.5, 0.51, 1.0, 2.0]
        for smiling in [-0.5, 0.0, 0.05, 0.15]:
            for left, right in itertools.product(values, repeat=2):
                self.assertNotIn(classify(signals(smiling, left, right)), SMILING_CATEGORIES)

    def test_out_of_range_values_are_accepted(self):
        self.assertEqual(classify(signals(5.0, -3.0, 7.0)), EmojiCategory.LEFT_WINK)
        self.assertEqual(classify(signals(-1.0, 2.0, 2.0)), EmojiCategory.FROWN)

    def test_all_categories_reachable(self):
        seen = {
            classify(signals(s, l, r))
            for s, l, r in itertools.product([0.0, 1.0], repeat=3)
        }
        self.assertEqual(seen, set(EmojiCategory))


if __name__ == "__main__":
    unittest.main()
