"""Prompt construction for remote comparison and topic generation."""

from unbubble_compare.analysis.thresholds import (
    MAX_COMMON_THEMES,
    MAX_DATA_POINTS,
    MAX_DIFFERENCES,
    MAX_SHARED_FACTS,
)
from unbubble_compare.data import Article

COMPARISON_INSTRUCTIONS = f"""\
You help readers find common ground between articles written from different \
political perspectives. Compare the articles above and report:

1. sharedFacts: facts, statistics, amounts, percentages or dates that appear in \
MORE THAN ONE article. Count a fact as shared when the core fact matches even \
if the wording differs. Write each as a short statement, e.g. "Both sources cite \
the $25B annual budget". At most {MAX_SHARED_FACTS}.
2. commonThemes: concerns or considerations every perspective addresses, even \
when their conclusions differ, e.g. "Both perspectives acknowledge environmental \
concerns". At most {MAX_COMMON_THEMES}.
3. differences: where the perspectives genuinely diverge in emphasis, framing, \
priorities or proposed solutions. Describe the substance rather than just \
labelling sides left or right. At most {MAX_DIFFERENCES}.
4. dataPoints: the specific numeric tokens (percentages, dollar amounts, counts, \
dates, rates) that occur in two or more articles, e.g. ["$25B", "10%", \
"150,000"]. At most {MAX_DATA_POINTS}.

Only cite facts actually present in the articles. Prefer specific numbers over \
generic statements. Return empty arrays when nothing qualifies.

Respond with ONLY a JSON object of this exact shape (every array holds plain \
strings, never nested objects):

{{
  "sharedFacts": ["Both sources cite the $25B annual budget"],
  "commonThemes": ["Both perspectives address economic implications"],
  "differences": ["One source stresses job losses while the other stresses long-term growth"],
  "dataPoints": ["$25B", "10%", "150,000"]
}}\
"""


def _article_block(article: Article, index: int) -> str:
    leaning_label = article.leaning.value.replace("-", " ").upper()
    lines = [
        f"ARTICLE {index + 1}:",
        f'Title: "{article.title}"',
        f"Source: {article.source} ({leaning_label} leaning)",
        f"Sub-topic: {article.sub_topic_name or 'N/A'}",
        f"Key Facts: {'; '.join(article.key_facts)}",
        "Summary:",
    ]
    lines.extend(f"  {i + 1}. {point}" for i, point in enumerate(article.summary))
    return "\n".join(lines)


def build_comparison_prompt(articles: list[Article]) -> str:
    """Build the single instruction string sent to the remote generator."""
    blocks = "\n\n---\n\n".join(_article_block(a, i) for i, a in enumerate(articles))
    return f"ARTICLES TO COMPARE:\n\n{blocks}\n\n{COMPARISON_INSTRUCTIONS}"


TOPIC_INSTRUCTIONS = """\
Build a balanced, multi-perspective knowledge map for the topic "{query}".

- Give the topic a clear name and a 1-2 sentence description of the debate.
- Add 2-3 distinct, non-overlapping sub-topics, each with a short name and description.
- Under each sub-topic list 2-5 articles from sources with different political \
leanings (at minimum one left-leaning and one right-leaning). Prefer real \
articles; include "url" only for real ones.
- Each article has a 10-15 word title, a source name, a leaning (one of "left", \
"lean-left", "center", "lean-right", "right", "neutral"), a 4-5 bullet summary \
with concrete data points, and 3-5 short key facts.
- All ids are kebab-case.

Respond with ONLY a JSON object of this shape:

{{
  "id": "topic-id",
  "name": "Topic Name",
  "description": "What the debate is about",
  "subTopics": [
    {{
      "id": "sub-topic-id",
      "name": "Sub-Topic Name",
      "description": "Which angle this covers",
      "articles": [
        {{
          "id": "article-id",
          "title": "Article title",
          "source": "Outlet",
          "leaning": "center",
          "summary": ["First point...", "Second point..."],
          "keyFacts": ["A concrete fact"]
        }}
      ]
    }}
  ]
}}\
"""


def build_topic_prompt(query: str) -> str:
    """Instruction string asking the generator for a ``Topic`` JSON object."""
    return TOPIC_INSTRUCTIONS.format(query=query)
