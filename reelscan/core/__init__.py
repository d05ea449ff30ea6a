"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et erreurs du domaine. Cette couche n'a AUCUNE dépendance vers
l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Library, Movie, Series, Season, Episode, ScheduledTask)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (MediaMetadata, MovieInfo, EpisodeInfo)
"""
