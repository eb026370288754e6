"""
Shared helpers: calendar arithmetic and display labels.
"""
