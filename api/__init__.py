"""
API Package - HTTP surface
"""
