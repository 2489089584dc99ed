"""Interface web : proxy TMDB et service de la page unique."""
