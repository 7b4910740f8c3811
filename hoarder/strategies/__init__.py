from hoarder.strategies.base import ResolverStrategy, ResolveTarget, StrategyRegistry
from hoarder.strategies.basic import BasicUrlStrategy
from hoarder.strategies.oembed import OEmbedStrategy
from hoarder.strategies.proxy import ProxyScrapeStrategy
from hoarder.strategies.social import SocialPathStrategy
from hoarder.strategies.unfurl import UnfurlServiceStrategy

__all__ = [
    "BasicUrlStrategy",
    "OEmbedStrategy",
    "ProxyScrapeStrategy",
    "ResolveTarget",
    "ResolverStrategy",
    "SocialPathStrategy",
    "StrategyRegistry",
    "UnfurlServiceStrategy",
]
