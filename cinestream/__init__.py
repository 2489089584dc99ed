"""CineStream - catalogue TMDB et lecture via fournisseurs de flux."""

__version__ = "0.1.0"
