"""
learnhub/grading/feedback.py
Canned feedback for graded activities. There is no model behind these;
the text only reflects the submission's size.
"""


def count_words(text: str) -> int:
    return len((text or "").split())


def format_duration(seconds: int) -> str:
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


def open_text_feedback(word_count: int) -> str:
    return (
        "Great work! Your response demonstrates understanding of the key concepts. "
        f"You've provided {word_count} words of thoughtful analysis. "
        "Consider expanding on practical applications in future responses."
    )


def voice_feedback(seconds: int) -> str:
    return (
        "Excellent speaking exercise! Your response was clear and well-structured. "
        f"Duration: {format_duration(seconds)}. Your pronunciation and pacing were good. "
        "Consider adding more specific examples in future responses."
    )
