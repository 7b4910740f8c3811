import unittest

from hoarder.models import Platform
from hoarder.tagging import TagVocabulary, generate_tags


class GenerateTagsTests(unittest.TestCase):
    def test_vocabulary_matches_precede_content_type_tags(self):
        tags = generate_tags("Learn React and TypeScript", "A guide to startup growth hacking", "web")
        self.assertEqual(tags, ["react", "typescript", "startup", "growth", "tutorial"])

    def test_twitter_platform_adds_social_tags(self):
        tags = generate_tags("Thoughts on hiring", None, Platform.TWITTER)
        self.assertEqual(tags, ["social media", "twitter"])

    def test_full_vocabulary_match_evicts_platform_tags(self):
        tags = generate_tags("AI and machine learning for React and Python startups", None, "twitter")
        self.assertEqual(tags, ["ai", "machine learning", "react", "python", "startup"])
        self.assertNotIn("twitter", tags)

    def test_platform_mentioned_in_text_triggers_group(self):
        tags = generate_tags("Best tweet of the week")
        self.assertEqual(tags, ["social media", "twitter"])

    def test_duplicates_are_dropped(self):
        tags = generate_tags("Business strategy on LinkedIn", None, "linkedin")
        self.assertEqual(tags, ["business", "strategy", "professional", "networking"])

        tags = generate_tags("Funny tiktok video", None, Platform.TIKTOK)
        self.assertEqual(tags, ["video", "social media", "tiktok"])

    def test_short_keywords_need_word_boundaries(self):
        self.assertEqual(generate_tags("She said the email was great"), [])
        self.assertEqual(generate_tags("Top startups and apps"), ["startup", "app"])

    def test_result_is_capped_and_stable(self):
        first = generate_tags("Python data analytics tutorial", "A blog update", "youtube")
        second = generate_tags("Python data analytics tutorial", "A blog update", "youtube")
        self.assertEqual(first, second)
        self.assertEqual(first, ["python", "data", "analytics", "video", "youtube"])
        self.assertEqual(generate_tags("Python data analytics", limit=2), ["python", "data"])

    def test_string_platform_and_missing_description(self):
        self.assertEqual(generate_tags("Ask me anything", platform="reddit"), ["community", "discussion", "reddit"])

    def test_custom_vocabulary(self):
        vocab = TagVocabulary(
            keywords=("rust",),
            platform_tags=(("mastodon", ("toot",), ("fediverse",)),),
            content_types=((("podcast",), "audio"),),
        )
        tags = generate_tags("Rust podcast", None, "mastodon", vocabulary=vocab)
        self.assertEqual(tags, ["rust", "fediverse", "audio"])


if __name__ == "__main__":
    unittest.main()
