"""
Runtime configuration for the car rental backend.
"""
