"""Star Gazer: a voice skill that tells you about the constellations."""

STAR_GAZER_VERSION = "1.2.0"

__all__ = ["STAR_GAZER_VERSION"]
