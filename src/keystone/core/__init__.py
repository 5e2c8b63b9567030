"""
Core infrastructure shared across Keystone: configuration.
"""
