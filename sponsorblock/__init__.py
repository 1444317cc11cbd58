"""A synchronous client for the SponsorBlock API: segments, segment info, user info, user stats and API status."""

__version__ = "0.6.1"