import pytest

from wp_content import config
from wp_content.wordpress_client import ContentClient


@pytest.fixture
def content_client() -> ContentClient:
    return ContentClient(api_base=config.API_BASE, timeout=5.0)


@pytest.fixture
def make_post():
    def _make_post(post_id: int = 1, slug: str = "hello-world", embedded: bool = True) -> dict:
        post = {
            "id": post_id,
            "slug": slug,
            "title": {"rendered": "<strong>Hello</strong> World"},
            "content": {"rendered": "<p>Body of the post</p>"},
            "excerpt": {"rendered": "<p>Short excerpt</p>\n"},
            "date": "2024-03-05T10:30:00",
            "modified": "2024-03-06T08:00:00",
            "featured_media": 42,
            "categories": [3, 7],
            "link": f"https://example.com/{slug}/",
        }
        if embedded:
            post["_embedded"] = {
                "wp:featuredmedia": [
                    {"source_url": "https://example.com/image.jpg", "alt_text": "An image"}
                ],
                "wp:term": [
                    [
                        {"id": 3, "name": "News", "slug": "news"},
                        {"id": 7, "name": "Tech", "slug": "tech"},
                    ],
                    [{"id": 11, "name": "python", "slug": "python"}],
                ],
            }
        return post

    return _make_post


@pytest.fixture
def categories_payload() -> list[dict]:
    return [
        {"id": 3, "name": "News", "slug": "news", "count": 10, "taxonomy": "category"},
        {"id": 7, "name": "Tech", "slug": "tech", "count": 4, "taxonomy": "category"},
    ]
