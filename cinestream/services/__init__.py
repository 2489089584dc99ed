"""
Services de la couche client : lecture, navigation, recherche, accueil, cricket.

Ces services orchestrent les ports (API, lecteur, notifications) et ne
dépendent d'aucune implémentation concrète.
"""
