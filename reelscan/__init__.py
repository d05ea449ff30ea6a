"""
Reelscan - Scan de bibliotheques media et reconciliation des metadonnees.

Ce package decouvre les fichiers video des bibliotheques configurees,
extrait leurs caracteristiques techniques (ffprobe), identifie le titre
depuis le nom de fichier, interroge TMDB et reconcilie le resultat dans
un graphe d'entites persistant (films, series -> saisons -> episodes).
Un planificateur de taches recurrentes pilote le scan et le nettoyage.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (reconciliation, scan, planification)
- adapters/ : Couche infrastructure (TMDB, ffprobe, parsing, fichiers)
- infrastructure/ : Persistance SQLModel
"""

__version__ = "0.1.0"
