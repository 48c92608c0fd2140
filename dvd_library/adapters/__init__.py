"""
Couche adaptateurs.

Adaptateurs d'interface (console interactive) branches sur les ports du domaine.
"""
