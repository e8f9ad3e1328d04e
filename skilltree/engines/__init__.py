"""
Engines: graph construction and graph queries.
"""
