"""
Crisis Keyword Lexicon

Weighted, labelled groups of risk phrases scanned by the keyword
detector. Phrases are lowercase and matched as substrings.

CLINICAL_REVIEW_REQUIRED: Phrases, weights and tiers need review
by mental health professionals before any change ships.

INVARIANT: Categories are declared in non-increasing weight order.
KeywordCrisisDetector refuses a lexicon that breaks it.
"""

from dataclasses import dataclass


CATEGORY_SUICIDE = "suicide"
CATEGORY_SELF_HARM = "self_harm"
CATEGORY_HOPELESSNESS = "hopelessness"
CATEGORY_ISOLATION = "isolation"
CATEGORY_DISTRESS = "distress"
CATEGORY_DEPRESSION = "depression"


@dataclass(frozen=True)
class CrisisKeywordCategory:
    """
    A named bucket of related phrases sharing one weight.

    Attributes:
        key: Category identifier recorded on indicators
        keywords: Lowercase phrases
        weight: Indicator severity for a hit (0-10)
        tier: Coarse clinical tier (immediate, severe, moderate, mild)
        description: Indicator label
    """

    key: str
    keywords: tuple[str, ...]
    weight: int
    tier: str
    description: str


CRISIS_KEYWORDS: tuple[CrisisKeywordCategory, ...] = (
    CrisisKeywordCategory(
        key=CATEGORY_SUICIDE,
        keywords=(
            "suicide", "kill myself", "end my life", "want to die",
            "better off dead", "suicide plan", "suicidal thoughts",
            "take my own life", "not worth living", "end it all",
            "permanent solution", "goodbye cruel world",
            "wish i was dead", "wish i were dead",
        ),
        weight=10,
        tier="immediate",
        description="Direct suicidal ideation",
    ),
    CrisisKeywordCategory(
        key=CATEGORY_SELF_HARM,
        keywords=(
            "cut myself", "hurt myself", "harm myself", "self harm",
            "self-harm", "cutting", "burning myself", "punish myself",
            "punishing myself", "deserve pain", "inflict pain",
        ),
        weight=8,
        tier="severe",
        description="Self-harm behaviors",
    ),
    CrisisKeywordCategory(
        key=CATEGORY_HOPELESSNESS,
        keywords=(
            "no hope", "hopeless", "pointless", "nothing matters",
            "give up", "no future", "trapped", "no way out",
            "stuck forever", "helpless",
        ),
        weight=6,
        tier="severe",
        description="Expressions of hopelessness",
    ),
    CrisisKeywordCategory(
        key=CATEGORY_ISOLATION,
        keywords=(
            "alone", "nobody cares", "no friends", "isolated", "abandoned",
            "rejected", "unwanted", "burden", "worthless", "useless",
        ),
        weight=4,
        tier="moderate",
        description="Social isolation and worthlessness",
    ),
    CrisisKeywordCategory(
        key=CATEGORY_DISTRESS,
        keywords=(
            "overwhelmed", "can't cope", "breaking down", "falling apart",
            "can't handle", "too much", "stressed out", "anxious", "panic",
        ),
        weight=3,
        tier="moderate",
        description="General psychological distress",
    ),
    CrisisKeywordCategory(
        key=CATEGORY_DEPRESSION,
        keywords=(
            "depressed", "sad", "empty", "numb", "dark thoughts", "low mood",
            "no energy", "tired of living", "everything hurts", "broken",
        ),
        weight=2,
        tier="mild",
        description="Depressive symptoms",
    ),
)


def is_weight_ordered(categories: tuple[CrisisKeywordCategory, ...]) -> bool:
    """Check that category weights never increase from first to last."""
    return all(
        current.weight >= following.weight
        for current, following in zip(categories, categories[1:])
    )
