"""Deterministic placeholder topic served when generation is unavailable."""

import re

from unbubble_compare.data import Article, Leaning, SubTopic, Topic

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9-]")

# (sub-topic name, description, [(title, source, leaning, summary, key facts)])
_MOCK_SUB_TOPICS: list[tuple[str, str, list[tuple[str, str, Leaning, list[str], list[str]]]]] = [
    (
        "Economic Impact",
        "Economic implications and market effects",
        [
            (
                "Economic Analysis: Market Perspectives",
                "The Economist",
                Leaning.CENTER,
                [
                    "This article examines the economic implications from a neutral, "
                    "data-driven perspective.",
                    "Key market indicators suggest significant impact on global trade patterns.",
                    "Experts predict both short-term volatility and long-term structural changes.",
                    "Investment strategies are adapting to new economic realities.",
                ],
                ["Market analysis", "Trade impact", "Investment trends"],
            ),
            (
                "Progressive Economic View",
                "The Guardian",
                Leaning.LEAN_LEFT,
                [
                    "A progressive perspective on economic implications and social equity "
                    "concerns.",
                    "Emphasis on protecting vulnerable communities during economic transitions.",
                    "Advocates for policy measures that prioritize social welfare.",
                    "Calls for systemic reform to address underlying inequalities.",
                ],
                ["Social equity", "Policy reform", "Community protection"],
            ),
        ],
    ),
    (
        "Policy Implications",
        "Regulatory and policy considerations",
        [
            (
                "Conservative Policy Framework",
                "National Review",
                Leaning.RIGHT,
                [
                    "Conservative analysis of policy implications and regulatory approaches.",
                    "Emphasizes limited government intervention and market-based solutions.",
                    "Argues for preserving individual freedoms and economic competitiveness.",
                    "Suggests incremental policy changes over sweeping reform.",
                ],
                ["Limited government", "Market solutions", "Individual freedom"],
            ),
            (
                "Policy Analysis from Center",
                "Reuters",
                Leaning.NEUTRAL,
                [
                    "Factual reporting on policy developments and regulatory changes.",
                    "Provides balanced coverage of different policy proposals.",
                    "Includes analysis from multiple expert perspectives.",
                    "Focuses on verifiable information and data-driven insights.",
                ],
                ["Factual reporting", "Expert analysis", "Data-driven"],
            ),
        ],
    ),
]


def slugify(text: str) -> str:
    """Lower-case kebab-case slug: whitespace to dashes, other symbols dropped."""
    return _NON_SLUG.sub("", _WHITESPACE.sub("-", text.lower()))


def mock_topic(query: str) -> Topic:
    """Placeholder topic for ``query`` with two sub-topics and four articles.

    The same query always produces the same topic.
    """
    slug = slugify(query)
    sub_topics = []
    article_number = 0
    for sub_index, (name, description, articles) in enumerate(_MOCK_SUB_TOPICS, 1):
        built = []
        for title, source, leaning, summary, key_facts in articles:
            article_number += 1
            built.append(
                Article(
                    id=f"{slug}-article-{article_number}",
                    title=title,
                    source=source,
                    leaning=leaning,
                    summary=tuple(summary),
                    key_facts=tuple(key_facts),
                    sub_topic_name=name,
                )
            )
        sub_topics.append(
            SubTopic(
                id=f"{slug}-subtopic-{sub_index}",
                name=name,
                description=description,
                articles=tuple(built),
            )
        )

    return Topic(
        id=slug or "sample-topic",
        name=query or "Sample Topic",
        description=f"AI-generated perspective analysis for: {query}",
        sub_topics=tuple(sub_topics),
    )
