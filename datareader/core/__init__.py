"""
Core contracts: errors, models, validators, rules and transformers.
"""
