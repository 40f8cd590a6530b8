"""
Request-scoped service dependencies.
"""
