"""
Constantes globales pour CineShelf.

Ce module contient les constantes utilisees dans l'application:
- Type MIME accepte pour l'import
- Synonymes d'en-tetes de colonnes par champ cible (ordre = priorite)
- Valeurs par defaut appliquees aux lignes importees
"""

# Seul type MIME accepte pour l'import en masse
CSV_MIME_TYPE = "text/csv"

# Synonymes d'en-tetes, le premier non vide l'emporte
NAME_COLUMNS = ("name", "title", "Name", "Title")
YEAR_COLUMNS = ("year", "Year")
DIRECTOR_COLUMNS = ("director", "Director")
GENRE_COLUMNS = ("genre", "Genre")
FORMAT_COLUMNS = ("format", "Format")
ACTORS_COLUMNS = ("actors", "Actors", "mainActors", "Main Actors")
COVER_URL_COLUMNS = ("coverUrl", "poster", "Poster", "image")

# Valeurs par defaut
UNKNOWN_ACTOR = "Unknown"
UNKNOWN_GENRE = "Unknown"
DEFAULT_COVER_URL = (
    "https://images.unsplash.com/photo-1526374965328-7f61d4dc18c5"
    "?w=400&h=600&fit=crop"
)

# Nombre d'erreurs affichees dans le resume d'import
IMPORT_ERROR_PREVIEW = 5
