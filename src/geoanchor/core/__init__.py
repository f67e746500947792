"""
Core coordinate transformation services.
"""
