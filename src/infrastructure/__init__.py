"""
Couche infrastructure de CineShelf.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports):

- persistence/ : Stockage SQLite avec SQLModel (modele et repository du catalogue)

Architecture hexagonale : le repository implemente le port du domaine,
ce qui permet de changer de stockage sans modifier les services.
"""
