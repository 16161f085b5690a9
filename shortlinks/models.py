from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class ShortLinkModel:
    target: str     # Original long URL
    shortcode: str  # Unique short identifier of the shortened URL
# fmt: on
