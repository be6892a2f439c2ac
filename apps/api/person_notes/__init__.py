"""Kinopoisk person notes: search, rank and normalize person records for note templates."""
