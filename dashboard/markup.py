"""
HTML fragments for the dashboard cards.

Everything interpolated here comes from the model's reply, which is shaped by
live search results, so every value is escaped before it reaches
`st.markdown(..., unsafe_allow_html=True)`.
"""

from html import escape
from typing import Iterable

from models.schemas import CollaborationConcept


def concept_card(concept: CollaborationConcept) -> str:
    return (
        f'<div class="concept-card"><b>{escape(concept.title)}</b><br>'
        f"<small>{escape(concept.description)}</small></div>"
    )


def source_chips(sources: Iterable[str]) -> str:
    return " ".join(f'<span class="source-chip">{escape(src)}</span>' for src in sources)


def recommendation_badge(recommendation: str, color: str) -> str:
    return (
        f'<span class="rec-badge" style="background:{escape(color)}">'
        f"Recommendation: {escape(recommendation)}</span>"
    )
