"""
Coeur du domaine CineStream : objets valeur, ports et exceptions.

Ne dépend d'aucun adaptateur concret (HTTP, stockage, interface).
"""
