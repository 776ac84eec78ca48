"""User interface for RedditPulse."""
