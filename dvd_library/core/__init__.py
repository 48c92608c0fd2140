"""
Couche domaine (core).

Contient l'entité métier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (fichiers, console).

Sous-packages :
- entities/ : Entité métier (Dvd) et son format d'affichage
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
