"""
MovieRate - Catalogue de films local avec notes et metadonnees.

Ce package scanne des repertoires de films, deduit titre et annee depuis
les noms de fichiers, enrichit chaque film via une API de metadonnees
(OMDb, TMDB) et affiche le resultat dans une page web locale.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (scan, enrichissement, agregation)
- adapters/ : Couche infrastructure (systeme de fichiers, parsing, clients API)
- web/ : Interface web FastAPI
"""

__version__ = "0.1.0"
