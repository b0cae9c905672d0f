from .feedback import (
    LetterState,
    LetterFeedback,
    FeedbackRound,
    matches_feedback,
    explain_mismatch,
    letter_bounds,
)
from .scoring import score, parse_pattern, feedback_round, round_to_pattern
from .constraints import filter_words_by_feedback
from .selection import pick_random_word
from .validation import validate_guess

__all__ = [
    "LetterState",
    "LetterFeedback",
    "FeedbackRound",
    "matches_feedback",
    "explain_mismatch",
    "letter_bounds",
    "score",
    "parse_pattern",
    "feedback_round",
    "round_to_pattern",
    "filter_words_by_feedback",
    "pick_random_word",
    "validate_guess",
]
