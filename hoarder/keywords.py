"""
Default tag tables: topical vocabulary, platform groups and content-type triggers.
"""

TOPIC_KEYWORDS = [
    "ai", "artificial intelligence", "machine learning", "ml",
    "react", "javascript", "typescript", "python", "node",
    "startup", "business", "entrepreneur", "funding",
    "design", "ux", "ui", "product", "user experience",
    "programming", "coding", "development", "software",
    "technology", "tech", "innovation", "future",
    "social media", "marketing", "growth", "strategy",
    "web3", "blockchain", "crypto", "defi",
    "mobile", "app", "ios", "android",
    "data", "analytics", "big data", "database",
]

# platform -> (text triggers, tags appended)
PLATFORM_TAGS = {
    "twitter": (["twitter", "tweet"], ["social media", "twitter"]),
    "linkedin": (["linkedin"], ["professional", "networking", "business"]),
    "reddit": (["reddit"], ["community", "discussion", "reddit"]),
    "tiktok": (["tiktok"], ["video", "social media", "tiktok"]),
    "youtube": (["youtube"], ["video", "youtube"]),
    "github": (["github"], ["code", "open source", "github"]),
}

# (text triggers, tag appended)
CONTENT_TYPE_TAGS = [
    (["thread"], "thread"),
    (["video", "tutorial"], "video"),
    (["article", "blog"], "article"),
    (["news", "update"], "news"),
    (["tutorial", "guide"], "tutorial"),
]
