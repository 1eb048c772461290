"""Static topic -> renderer lookup."""

import logging

from fuzzyweather.conditions import clouds, cold, heat, humidity, noop, rain, snow, wind
from fuzzyweather.conditions.base import Renderer
from fuzzyweather.models.condition import Topic

logger = logging.getLogger(__name__)

RENDERERS: dict[str, Renderer] = {
    Topic.RAIN: rain,
    Topic.SNOW: snow,
    Topic.HEAT: heat,
    Topic.HEAT_HUMID: heat,
    Topic.HUMIDITY: humidity,
    Topic.COLD: cold,
    Topic.COLD_WIND: cold,
    Topic.CLOUDS: clouds,
    Topic.WIND: wind,
}


def get_renderer(topic: str) -> Renderer:
    """Renderer for a topic; unknown topics get one that says nothing."""
    renderer = RENDERERS.get(topic)
    if renderer is None:
        logger.debug("No condition renderer for %s", topic)
        return noop
    return renderer
