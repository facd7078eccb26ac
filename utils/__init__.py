"""
Utilities Package - logging setup.
"""
