"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Port repository : Contrat de persistance du catalogue
- IDvdLibraryDao : Chargement, sauvegarde et accès aux DVD

Port interface utilisateur : Contrat d'entrée/sortie console
- IUserIO : Affichage de messages et saisie de texte ou de nombres
- InputResult : Résultat d'une saisie (valeur ou type d'erreur)
- InputError : Types d'erreur de saisie
"""

from dvd_library.core.ports.repositories import IDvdLibraryDao
from dvd_library.core.ports.user_io import InputError, InputResult, IUserIO

__all__ = [
    # Repositories
    "IDvdLibraryDao",
    # Interface utilisateur
    "IUserIO",
    "InputResult",
    "InputError",
]
