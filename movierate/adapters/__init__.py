"""
Couche infrastructure : implementations concretes des ports du domaine.

- file_system : parcours du disque
- parsing/ : extraction titre/annee par expressions regulieres
- api/ : clients des API de metadonnees (OMDb, TMDB)
"""
