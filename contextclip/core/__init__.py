"""Core clipboard, context and search components"""
