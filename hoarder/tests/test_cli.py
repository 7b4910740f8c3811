import json
import unittest
from unittest.mock import patch

from click.testing import CliRunner

from hoarder.cli import cli
from hoarder.errors import NetworkFailure


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_tags_command(self):
        result = self.runner.invoke(
            cli, ["tags", "Learn React and TypeScript", "--description", "A guide to startup growth hacking"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout), ["react", "typescript", "startup", "growth", "tutorial"])

    def test_tags_command_with_platform(self):
        result = self.runner.invoke(cli, ["tags", "Morning notes", "--platform", "twitter"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout), ["social media", "twitter"])

    @patch("hoarder.resolver.HttpClient")
    def test_resolve_command_for_twitter_needs_no_network(self, mock_client_cls):
        result = self.runner.invoke(cli, ["resolve", "https://x.com/jdoe/status/123"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.stdout)
        self.assertEqual(payload["title"], "Post by @jdoe")
        self.assertEqual(payload["platform"], "twitter")
        self.assertEqual(payload["tags"], ["social media", "twitter"])
        mock_client_cls.return_value.get_json.assert_not_called()

    @patch("hoarder.resolver.HttpClient")
    def test_resolve_command_with_page_title(self, mock_client_cls):
        mock_client_cls.return_value.get_json.side_effect = NetworkFailure("offline")
        result = self.runner.invoke(
            cli, ["resolve", "https://example.com/x", "--title", "Given title", "--description", "some news"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.stdout)
        self.assertEqual(payload["title"], "Given title")
        self.assertEqual(payload["description"], "some news")
        self.assertEqual(payload["tags"], ["news"])


if __name__ == "__main__":
    unittest.main()
