"""Detection and spellcheck services."""
