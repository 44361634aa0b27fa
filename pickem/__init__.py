"""
Race-data layer of the F1 pick'em backend.
"""
