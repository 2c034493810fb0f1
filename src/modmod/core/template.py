"""Literal marker substitution for unit templates.

This is plain text replacement, not a template language: every occurrence of
a marker is replaced, absent markers are ignored, and nothing else in the
template is interpreted.
"""

from modmod.core.aggregator import UnitAggregate

CONTENT_MARKER = "#[modmod:content]\n"
OBJECTIVES_MARKER = "#[modmod:objectives]"
SUMMARY_MARKER = "#[modmod:summary]"


def render_template(template: str, aggregate: UnitAggregate) -> str:
    return (
        template.replace(CONTENT_MARKER, aggregate.content)
        .replace(OBJECTIVES_MARKER, aggregate.objectives)
        .replace(SUMMARY_MARKER, aggregate.summary)
    )
