"""
Configuration module for One Path.

Usage:
    from one_path.config import settings as config
"""
