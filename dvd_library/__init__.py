"""
DVD Library - Catalogue de DVD personnel en mode console.

Ce package fournit un menu interactif pour ajouter, modifier, supprimer,
lister et rechercher des DVD, avec persistance dans un fichier texte délimité.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entité Dvd, ports, exceptions)
- infrastructure/ : Persistance (stockage mémoire, sérialisation, fichier)
- adapters/ : Couche interface (console, vue, contrôleur)
"""

__version__ = "0.1.0"
