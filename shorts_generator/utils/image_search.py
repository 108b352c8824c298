from urllib.parse import quote_plus

from shorts_generator.constants import IMAGE_SEARCH_URL_TEMPLATE
from shorts_generator.generation.errors import InvalidInput


def build_image_search_url(topic: str) -> str:
    """Image-search URL for the topic, e.g. 'leopard cub' -> ...&q=leopard+cub"""
    if not topic or not topic.strip():
        raise InvalidInput("Please enter a topic to search for images.")
    return IMAGE_SEARCH_URL_TEMPLATE.format(query=quote_plus(topic.strip()))
