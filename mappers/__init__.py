"""
mappers/ - Mapping Layer
========================
Pure functions that copy fields between entities and transfer objects.
Services receive a mapper as a collaborator, so tests can swap it freely.
"""
