"""
Configuration for the type tour.
"""

from dataclasses import dataclass


@dataclass
class TourConfig:
    """Timing and behaviour settings for the asynchronous demos."""
    fetch_delay: float = 2.0  # Simulated latency of a user fetch, seconds
    retry_delay: float = 1.0  # Constant pause between retry attempts
    api_delay: float = 1.0  # Simulated latency of a generic API call
    max_retries: int = 3
    demo_retries: int = 2  # Attempt budget used by the retry section of the tour

    # Race settings
    cancel_race_losers: bool = True  # Cancel fetches that lose a race

    # Debug/Verbose mode
    verbose: bool = False  # Enable detailed logging for debugging
