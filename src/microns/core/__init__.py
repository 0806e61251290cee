"""
Core package: math safeguards, domain value types, serialization contracts.
"""
