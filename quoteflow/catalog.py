# quoteflow/catalog.py
"""
Fixed content catalog: quote corpus, narration voices, music vocabulary.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuoteTemplate:
    """A seed quote that generation samples from."""

    text: str
    author: str
    category: str


@dataclass(frozen=True)
class Voice:
    """A narration voice option."""

    id: str
    name: str
    gender: str
    language: str


QUOTE_CORPUS: tuple[QuoteTemplate, ...] = (
    QuoteTemplate("The only way to do great work is to love what you do.", "Steve Jobs", "success"),
    QuoteTemplate("Life is what happens to you while you're busy making other plans.", "John Lennon", "life"),
    QuoteTemplate("The future belongs to those who believe in the beauty of their dreams.", "Eleanor Roosevelt", "dreams"),
    QuoteTemplate("It is during our darkest moments that we must focus to see the light.", "Aristotle", "inspiration"),
    QuoteTemplate("Success is not final, failure is not fatal: it is the courage to continue that counts.", "Winston Churchill", "success"),
    QuoteTemplate("The only impossible journey is the one you never begin.", "Tony Robbins", "motivation"),
    QuoteTemplate("In the middle of difficulty lies opportunity.", "Albert Einstein", "opportunity"),
    QuoteTemplate("Believe you can and you're halfway there.", "Theodore Roosevelt", "belief"),
    QuoteTemplate("The best time to plant a tree was 20 years ago. The second best time is now.", "Chinese Proverb", "action"),
    QuoteTemplate("Your limitation—it's only your imagination.", "Unknown", "mindset"),
)

ALL_CATEGORIES = "all"

# Order matches the quote generator's category picker
CATEGORIES: tuple[str, ...] = (
    ALL_CATEGORIES,
    "success",
    "motivation",
    "life",
    "dreams",
    "inspiration",
    "opportunity",
    "belief",
    "action",
    "mindset",
)

VOICES: tuple[Voice, ...] = (
    Voice("neural-voice-1", "Sarah - Professional", "Female", "en-US"),
    Voice("neural-voice-2", "David - Energetic", "Male", "en-US"),
    Voice("neural-voice-3", "Emma - Warm", "Female", "en-GB"),
    Voice("neural-voice-4", "Michael - Confident", "Male", "en-US"),
    Voice("neural-voice-5", "Olivia - Inspiring", "Female", "en-AU"),
)

LANGUAGES: tuple[str, ...] = ("en-US", "en-GB", "en-AU")

MUSIC_GENRES: tuple[str, ...] = (
    "ambient", "cinematic", "uplifting", "inspirational", "corporate",
    "emotional", "motivational", "peaceful", "energetic", "dramatic",
)

MUSIC_MOODS: tuple[str, ...] = (
    "inspirational", "calm", "upbeat", "emotional", "powerful",
    "serene", "triumphant", "hopeful", "contemplative", "dynamic",
)


def templates_for(category: str) -> list[QuoteTemplate]:
    """Return the corpus filtered to a category ("all" returns everything)."""
    if category == ALL_CATEGORIES:
        return list(QUOTE_CORPUS)
    return [t for t in QUOTE_CORPUS if t.category == category]


def voice_ids() -> set[str]:
    return {v.id for v in VOICES}
