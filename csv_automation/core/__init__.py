"""
Core models, validators and configuration.
"""
