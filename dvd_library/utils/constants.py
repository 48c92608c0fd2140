"""
Constantes globales pour DVD Library.

Ce module contient les constantes partagées entre la persistance et l'affichage:
- Fichier de stockage et délimiteur par défaut
- Séparateur des colonnes d'affichage
"""

from pathlib import Path

# Fichier de stockage par défaut (répertoire courant)
DEFAULT_LIBRARY_FILE = Path("DVDLibrary.txt")

# Délimiteur entre les champs d'une ligne persistée
DEFAULT_DELIMITER = "::"

# Séparateur entre les colonnes du tableau affiche
COLUMN_SEPARATOR = " | "
