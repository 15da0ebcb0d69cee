"""
CineShelf - Gestion d'un catalogue personnel de films.

Ce package permet de constituer un catalogue de films (ajout manuel avec
pre-remplissage OMDb, import en masse depuis un export CSV), puis de le
parcourir par recherche textuelle, genre et decennie.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports)
- services/ : Couche application (import, catalogue, recherche de métadonnées)
- adapters/ : Adaptateurs (CLI, parser CSV, client OMDb)
- infrastructure/ : Persistance SQLite (SQLModel)
- web/ : API JSON (FastAPI)
"""
