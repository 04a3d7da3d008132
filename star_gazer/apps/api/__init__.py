"""HTTP endpoint for the Star Gazer skill."""
