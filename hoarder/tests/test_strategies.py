import unittest
from unittest.mock import MagicMock

from hoarder.errors import NetworkFailure, ParseFailure
from hoarder.models import Platform
from hoarder.platforms import parse_url, platform_for_host
from hoarder.strategies import (
    BasicUrlStrategy,
    OEmbedStrategy,
    ProxyScrapeStrategy,
    ResolveTarget,
    SocialPathStrategy,
    StrategyRegistry,
    UnfurlServiceStrategy,
)

SAMPLE_HTML = """<html><head>
<title>Plain page title</title>
<meta property="og:title" content="OG Title">
<meta name="description" content="Meta description">
<meta property="og:description" content="OG description">
<meta name="twitter:image" content="https://cdn.example.com/card.png">
</head><body></body></html>"""


def _target(url: str) -> ResolveTarget:
    parsed = parse_url(url)
    return ResolveTarget(parsed=parsed, platform=platform_for_host(parsed.host))


class SocialPathStrategyTests(unittest.TestCase):
    def test_status_url_synthesizes_title_and_post_id(self):
        result = SocialPathStrategy().resolve(_target("https://x.com/jdoe/status/123"))
        self.assertEqual(result.title, "Post by @jdoe")
        self.assertEqual(result.description, "Post ID: 123")
        self.assertEqual(result.platform, Platform.TWITTER)
        self.assertIsNone(result.image)

    def test_profile_and_bare_host(self):
        strategy = SocialPathStrategy()
        self.assertEqual(strategy.resolve(_target("https://twitter.com/jdoe")).title, "Posts by @jdoe")
        self.assertEqual(strategy.resolve(_target("https://x.com/")).title, "Twitter Post")

    def test_other_platforms_pass(self):
        self.assertIsNone(SocialPathStrategy().resolve(_target("https://example.com/post")))


class BasicUrlStrategyTests(unittest.TestCase):
    def test_last_segment_becomes_title(self):
        result = BasicUrlStrategy().resolve(_target("https://example.com/some-article-title"))
        self.assertEqual(result.title, "Some article title")
        self.assertEqual(result.platform, Platform.WEB)
        self.assertIsNone(result.description)
        self.assertIsNone(result.image)

    def test_percent_decoding_and_underscores(self):
        result = BasicUrlStrategy().resolve(_target("https://example.com/blog/my_first%20post"))
        self.assertEqual(result.title, "My first post")

    def test_hostname_without_www_when_no_path(self):
        self.assertEqual(BasicUrlStrategy().resolve(_target("https://www.example.com/")).title, "example.com")

    def test_blank_segment_falls_back_to_hostname(self):
        strategy = BasicUrlStrategy()
        self.assertEqual(strategy.resolve(_target("https://www.example.com/-/")).title, "example.com")
        self.assertEqual(strategy.resolve(_target("https://blog.example.com/posts/__")).title, "blog.example.com")

    def test_platform_labels(self):
        strategy = BasicUrlStrategy()
        reddit = "https://www.reddit.com/r/python/comments/abc123/what_is_the_best_ide/"
        self.assertEqual(strategy.resolve(_target(reddit)).title, "What is the best ide")
        self.assertEqual(strategy.resolve(_target("https://reddit.com/r/python")).title, "Reddit Post")
        self.assertEqual(strategy.resolve(_target("https://www.linkedin.com/feed/")).title, "LinkedIn Post")
        self.assertEqual(strategy.resolve(_target("https://www.tiktok.com/@user/video/1")).title, "TikTok Video")


class OEmbedStrategyTests(unittest.TestCase):
    def test_youtube_payload(self):
        client = MagicMock()
        client.get_json.return_value = {
            "title": "Never Gonna Give You Up",
            "author_name": "Rick Astley",
            "thumbnail_url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
        }
        url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
        result = OEmbedStrategy(client).resolve(_target(url))

        client.get_json.assert_called_once_with(
            "https://www.youtube.com/oembed", params={"url": url, "format": "json"}
        )
        self.assertEqual(result.title, "Never Gonna Give You Up")
        self.assertEqual(result.description, "By Rick Astley")
        self.assertEqual(result.image, "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg")
        self.assertEqual(result.platform, Platform.YOUTUBE)

    def test_non_video_platform_skips_network(self):
        client = MagicMock()
        self.assertIsNone(OEmbedStrategy(client).resolve(_target("https://example.com/a")))
        client.get_json.assert_not_called()

    def test_missing_title_is_parse_failure(self):
        client = MagicMock()
        client.get_json.return_value = {"author_name": "someone"}
        with self.assertRaises(ParseFailure):
            OEmbedStrategy(client).resolve(_target("https://vimeo.com/76979871"))


class UnfurlServiceStrategyTests(unittest.TestCase):
    def test_microlink_envelope(self):
        client = MagicMock()
        client.get_json.return_value = {
            "status": "success",
            "data": {
                "title": "A great read",
                "description": "All about it",
                "image": {"url": "https://cdn.example.com/og.png"},
            },
        }
        strategy = UnfurlServiceStrategy(client, endpoint="https://unfurl.test/", api_key="secret")
        result = strategy.resolve(_target("https://example.com/read"))

        client.get_json.assert_called_once_with(
            "https://unfurl.test/", params={"url": "https://example.com/read"}, headers={"x-api-key": "secret"}
        )
        self.assertEqual(result.title, "A great read")
        self.assertEqual(result.description, "All about it")
        self.assertEqual(result.image, "https://cdn.example.com/og.png")

    def test_bare_object_with_string_image_and_no_title(self):
        client = MagicMock()
        client.get_json.return_value = {"description": "Only a description", "image": "https://cdn/x.png"}
        result = UnfurlServiceStrategy(client, endpoint="https://unfurl.test/").resolve(
            _target("https://example.com/hidden-gem")
        )
        self.assertEqual(result.title, "Hidden gem")
        self.assertEqual(result.image, "https://cdn/x.png")

    def test_failed_status_and_empty_payloads(self):
        client = MagicMock()
        strategy = UnfurlServiceStrategy(client, endpoint="https://unfurl.test/")
        for payload in [{"status": "fail", "data": {"title": "x"}}, {"data": {}}, [], "nope", {"data": "x"}]:
            with self.subTest(payload=payload):
                client.get_json.return_value = payload
                with self.assertRaises(ParseFailure):
                    strategy.resolve(_target("https://example.com/a"))

    def test_network_failure_propagates_to_resolver(self):
        client = MagicMock()
        client.get_json.side_effect = NetworkFailure("timeout")
        with self.assertRaises(NetworkFailure):
            UnfurlServiceStrategy(client, endpoint="https://unfurl.test/").resolve(_target("https://example.com/a"))


class ProxyScrapeStrategyTests(unittest.TestCase):
    def test_meta_tags_are_scraped(self):
        client = MagicMock()
        client.get_json.return_value = {"contents": SAMPLE_HTML}
        result = ProxyScrapeStrategy(client, endpoint="https://proxy.test/get").resolve(
            _target("https://example.com/page")
        )
        self.assertEqual(result.title, "OG Title")
        self.assertEqual(result.description, "Meta description")
        self.assertEqual(result.image, "https://cdn.example.com/card.png")

    def test_title_tag_only(self):
        client = MagicMock()
        client.get_json.return_value = {"contents": "<html><head><title> Just   a title </title></head></html>"}
        result = ProxyScrapeStrategy(client, endpoint="https://proxy.test/get").resolve(
            _target("https://example.com/page")
        )
        self.assertEqual(result.title, "Just a title")
        self.assertIsNone(result.description)

    def test_empty_or_missing_contents(self):
        client = MagicMock()
        strategy = ProxyScrapeStrategy(client, endpoint="https://proxy.test/get")
        for payload in [{"contents": None}, {"contents": "<html><body>hi</body></html>"}, {}]:
            with self.subTest(payload=payload):
                client.get_json.return_value = payload
                with self.assertRaises(ParseFailure):
                    strategy.resolve(_target("https://example.com/page"))


class StrategyRegistryTests(unittest.TestCase):
    def test_keeps_order_and_rejects_duplicates(self):
        registry = StrategyRegistry()
        registry.register(SocialPathStrategy())
        registry.register(BasicUrlStrategy())
        self.assertEqual(registry.names(), ["social", "basic"])
        self.assertEqual(len(registry), 2)
        with self.assertRaises(ValueError):
            registry.register(BasicUrlStrategy())


if __name__ == "__main__":
    unittest.main()
