"""Conversion stages.

Each module implements one step of the export: read the GeoJSON input,
flatten its features into location records, write the output document.
"""
