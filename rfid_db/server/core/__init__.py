"""
Server core: configuration settings and constants.
"""
