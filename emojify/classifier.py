# emojify/classifier.py
import logging

from emojify.models import EmojiCategory, FaceSignals

logger = logging.getLogger(__name__)

SMILING_PROB_THRESHOLD = 0.15
EYE_OPEN_PROB_THRESHOLD = 0.5


def classify(signals: FaceSignals) -> EmojiCategory:
    """Pick the emoji category for one face from its probability signals."""
    logger.debug("classify: smilingProbability - %s", signals.smiling_probability)
    logger.debug("classify: leftEyeOpenProbability - %s", signals.left_eye_open_probability)
    logger.debug("classify: rightEyeOpenProbability - %s", signals.right_eye_open_probability)

    smiling = signals.smiling_probability > SMILING_PROB_THRESHOLD
    left_closed = signals.left_eye_open_probability < EYE_OPEN_PROB_THRESHOLD
    right_closed = signals.right_eye_open_probability < EYE_OPEN_PROB_THRESHOLD

    if smiling:
        if left_closed and not right_closed:
            category = EmojiCategory.LEFT_WINK
        elif not left_closed and right_closed:
            category = EmojiCategory.RIGHT_WINK
        elif left_closed:
            category = EmojiCategory.CLOSED_EYE_SMILE
        else:
            category = EmojiCategory.SMILE
    else:
        if left_closed and not right_closed:
            category = EmojiCategory.LEFT_WINK_FROWN
        elif not left_closed and right_closed:
            category = EmojiCategory.RIGHT_WINK_FROWN
        elif left_closed:
            category = EmojiCategory.CLOSED_EYE_FROWN
        else:
            category = EmojiCategory.FROWN

    logger.debug("classify: %s", category.value)
    return category
