import logging

from attrs import define

from modmod.core.loader import Loaded
from modmod.core.specs import TopicSpec
from modmod.core.utils.file_utils import read_text

logger = logging.getLogger(__name__)

TOPIC_SEPARATOR = "---\n\n"


def bullet_item(text: str) -> str:
    return f"- {text.strip()}\n"


@define
class UnitAggregate:
    """Slide content, objectives and summary collected from a unit's topics."""

    content: str = ""
    objectives: str = ""
    summary: str = ""

    def add_topic(self, topic: Loaded[TopicSpec]) -> None:
        slides_path = topic.resolve(topic.data.content)
        logger.debug(f"Adding slides of topic {topic.data.name!r} from {slides_path}")
        slides = read_text(slides_path)
        self.content += TOPIC_SEPARATOR + slides.strip() + "\n"
        for objective in topic.data.objectives:
            self.objectives += bullet_item(objective)
        for item in topic.data.summary:
            self.summary += bullet_item(item)


def aggregate_topics(topics: list[Loaded[TopicSpec]]) -> UnitAggregate:
    """Concatenate the topics' slides and bullet lists in declaration order."""
    aggregate = UnitAggregate()
    for topic in topics:
        aggregate.add_topic(topic)
    return aggregate
