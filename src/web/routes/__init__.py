"""Routes de l'API JSON CineShelf."""
