"""Pure helpers (color math, hashing, SVG text) with no rendering policy."""
