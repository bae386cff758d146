# examples/basic_example.py
"""
Basic example: run the full tour with shortened delays.
"""

import asyncio

from typetour import TourConfig, run_examples


def main():
    # Realistic latency is seconds per fetch; a tenth of a second is enough to
    # see the async sections interleave.
    config = TourConfig(fetch_delay=0.1, retry_delay=0.05, api_delay=0.05)
    asyncio.run(run_examples(config))


if __name__ == "__main__":
    main()
