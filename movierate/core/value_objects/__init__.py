"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ParsedFilename : Titre et annee extraits d'un nom de fichier
"""

from movierate.core.value_objects.parsed_info import ParsedFilename

__all__ = ["ParsedFilename"]
