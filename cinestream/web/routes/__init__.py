"""Routes web : proxy TMDB (/api) et page unique."""
