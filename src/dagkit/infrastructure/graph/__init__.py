"""Graph documents and the loaders that build them from files."""
