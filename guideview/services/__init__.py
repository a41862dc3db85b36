"""Services: fetching and parsing guides."""

from .guide_fetcher import GuideFetcher, guide_url
from .guide_parser import parse_guide

__all__ = ["GuideFetcher", "guide_url", "parse_guide"]
