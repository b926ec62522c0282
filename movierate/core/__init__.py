"""
Couche domaine (core).

Contient l'entite Movie, les ports (interfaces abstraites) et les objets valeur.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- entities/ : Entite metier Movie
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (ParsedFilename)
"""
