"""
Adaptateurs de parsing pour Reelscan.

Ce package contient :
- filename_parser: Heuristiques regex sur les noms de fichiers
- probe_parser: Conversion de la sortie JSON de ffprobe en MediaMetadata
- FFprobeExtractor: Sondage des fichiers video via ffprobe
"""
