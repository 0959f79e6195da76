"""Mood definitions."""

from dataclasses import dataclass
from enum import StrEnum


class MoodId(StrEnum):
    """Closed set of supported moods."""

    HAPPY = "happy"
    SAD = "sad"
    ENERGETIC = "energetic"
    TIRED = "tired"
    STRESSED = "stressed"
    RELAXED = "relaxed"


@dataclass(frozen=True)
class Mood:
    """Mood with display metadata."""

    id: MoodId
    label: str
    emoji: str
    description: str


MOODS: tuple[Mood, ...] = (
    Mood(MoodId.HAPPY, "Happy", "😊", "I feel great!"),
    Mood(MoodId.SAD, "Sad", "😢", "A bit down..."),
    Mood(MoodId.ENERGETIC, "Energetic", "⚡", "Full of energy!"),
    Mood(MoodId.TIRED, "Tired", "😴", "I need some rest..."),
    Mood(MoodId.STRESSED, "Stressed", "😤", "Such a busy day!"),
    Mood(MoodId.RELAXED, "Relaxed", "😌", "At peace."),
)


def get_mood(mood_id: str) -> Mood | None:
    """Return the mood for an identifier, if known."""
    for mood in MOODS:
        if mood.id == mood_id:
            return mood
    return None
