"""Transport entrypoints for the Star Gazer skill."""
