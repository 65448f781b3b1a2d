"""Static keyword tables driving the heuristic comparison.

Everything here is plain data so each table can be tested on its own. Order
matters wherever a table is scanned for a first hit (claim areas, value
indicators).
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordGroup:
    """A label and the keywords that signal it."""

    label: str
    keywords: tuple[str, ...]

    def word_pattern(self) -> re.Pattern[str]:
        """Case-insensitive, word-boundary alternation over the keywords."""
        alternation = "|".join(re.escape(k) for k in self.keywords)
        return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)

    def hits_substring(self, text: str) -> bool:
        """True if any keyword occurs anywhere in ``text`` (case-insensitive)."""
        lowered = text.lower()
        return any(k in lowered for k in self.keywords)


# ============================================================
# Theme vocabulary (word-boundary matched)
# ============================================================

THEMES: tuple[KeywordGroup, ...] = (
    KeywordGroup(
        "economic impact",
        (
            "economic", "economy", "economics", "cost", "costs", "price", "prices",
            "budget", "spending", "investment", "market", "markets", "growth", "tax",
            "taxes", "financial",
        ),
    ),
    KeywordGroup(
        "safety concerns",
        (
            "safety", "safe", "risk", "risks", "danger", "dangerous", "accident",
            "accidents", "disaster", "hazard", "hazards",
        ),
    ),
    KeywordGroup(
        "environmental impact",
        (
            "environment", "environmental", "climate", "emissions", "carbon",
            "pollution", "sustainability", "sustainable", "renewable",
        ),
    ),
    KeywordGroup(
        "health considerations",
        ("health", "healthcare", "medical", "disease", "mental", "wellbeing", "patients"),
    ),
    KeywordGroup(
        "social implications",
        (
            "social", "society", "community", "communities", "equity", "inequality",
            "families", "fairness",
        ),
    ),
    KeywordGroup(
        "innovation potential",
        (
            "innovation", "innovative", "technology", "technological", "breakthrough",
            "advancement", "research",
        ),
    ),
    KeywordGroup(
        "employment impact",
        (
            "jobs", "job", "employment", "unemployment", "workers", "workforce", "wages",
            "labor",
        ),
    ),
)


# ============================================================
# Divergence claim areas (substring matched, iterated in order)
# ============================================================

CLAIM_AREAS: tuple[KeywordGroup, ...] = (
    KeywordGroup("Economic impact", ("cost", "price", "economics", "spending")),
    KeywordGroup("Safety considerations", ("safety", "risk", "danger", "accident", "disaster")),
    KeywordGroup("Environmental impact", ("environment", "climate", "emissions", "carbon")),
    KeywordGroup("Performance outcomes", ("productivity", "efficiency", "output", "performance")),
    KeywordGroup("Technological potential", ("innovation", "technology", "advancement")),
    KeywordGroup("Social impact", ("social", "community", "people", "workers", "families")),
)

# Indicator keyword -> underlying value. Scanned in order; the first hit wins.
DIVERGENCE_VALUE_INDICATORS: tuple[tuple[str, str], ...] = (
    ("safety", "safety"),
    ("risk", "safety"),
    ("cost", "growth"),
    ("efficiency", "growth"),
    ("equity", "equity"),
    ("access", "equity"),
    ("freedom", "freedom"),
    ("autonomy", "freedom"),
    ("security", "security"),
    ("defense", "security"),
    ("environment", "environment"),
    ("climate", "environment"),
)


# ============================================================
# Evidence and omission analysis
# ============================================================

TOPIC_UNIVERSE: tuple[str, ...] = (
    "cost", "economics", "safety", "risk", "environment", "climate",
    "productivity", "efficiency", "innovation", "technology",
    "social", "health", "mental", "community", "workers",
    "jobs", "employment", "freedom", "autonomy", "security",
    "equity", "access", "waste", "storage", "timeline", "schedule",
)

RESEARCH_LANGUAGE = re.compile(r"study|research|analysis|data|report|findings", re.IGNORECASE)


# ============================================================
# Shared factual baseline
# ============================================================

BASELINE_NUMBER = re.compile(
    r"\d+(?:,\d+)*(?:\.\d+)?"
    r"(?:\s*(?:billion|million|thousand|%|percent|years?|months?|people|workers?|jobs?|times?))?",
    re.IGNORECASE,
)

BASELINE_EVENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"Fukushima|Chernobyl|Three Mile Island|Vogtle|Yucca Mountain|Apollo|Mars|Germany|China",
        re.IGNORECASE,
    ),
    re.compile(r"disaster|accident|displacement|deaths?|casualties?|overruns?", re.IGNORECASE),
)

BASELINE_CONSTRAINT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\$\d+.*(?:billion|million|thousand)", re.IGNORECASE),
    re.compile(r"cost|price|budget|spending|investment", re.IGNORECASE),
    re.compile(r"timeline|schedule|years?|months?|decades?", re.IGNORECASE),
    re.compile(r"emissions?|carbon|pollution|climate", re.IGNORECASE),
)

# Loose numeric token used to spot the same figure in several articles.
SHARED_NUMBER = re.compile(r"\$?\d+(?:,\d{3})*(?:\.\d+)?[BMKkmbt%]?")


# ============================================================
# Single-article perspective analysis
# ============================================================

FRAMING_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"essential|crucial|critical|vital|necessary|required", re.IGNORECASE),
    re.compile(r"threat|risk|danger|concern|problem|issue", re.IGNORECASE),
    re.compile(r"opportunity|benefit|advantage|promise|potential", re.IGNORECASE),
    re.compile(r"proves?|demonstrates?|shows?|indicates?|suggests?", re.IGNORECASE),
)

PERSPECTIVE_VALUE_INDICATORS: tuple[tuple[str, str], ...] = (
    ("safety", "safety"),
    ("risk", "safety"),
    ("security", "security"),
    ("freedom", "freedom"),
    ("autonomy", "freedom"),
    ("equity", "equity"),
    ("access", "equity"),
    ("fairness", "equity"),
    ("growth", "growth"),
    ("efficiency", "growth"),
    ("productivity", "growth"),
    ("environment", "environment"),
    ("climate", "environment"),
    ("sustainability", "environment"),
)

EMPHASIS_TOPICS: tuple[str, ...] = (
    "cost", "safety", "productivity", "environment", "innovation", "social", "health",
)

OMISSION_TOPICS: tuple[str, ...] = (
    "cost", "safety", "environment", "productivity", "social", "health", "innovation",
)

LANGUAGE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("alarmist", re.compile(r"devastating|tragic|alarming|crisis|dangerous", re.IGNORECASE)),
    (
        "optimistic",
        re.compile(r"promising|breakthrough|revolutionary|game-changer|transformation", re.IGNORECASE),
    ),
    ("nuanced", re.compile(r"however|although|despite|but|nevertheless", re.IGNORECASE)),
    ("evidence-based", re.compile(r"studies?|research|data|analysis|findings?", re.IGNORECASE)),
)
