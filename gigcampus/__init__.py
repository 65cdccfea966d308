"""GigCampus freelance marketplace.

Modules:
    - ranking: Reputation score, tiers, level curve, and badge achievements
    - shared: Logging, clock, and schema utilities used across the marketplace
"""

__version__ = "0.1.0"
