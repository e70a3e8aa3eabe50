"""
Application layer for the weather bounded context.
"""
