"""Matchers — exact token-prefix matching and edit-distance fuzzy matching."""
