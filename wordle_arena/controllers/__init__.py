"""
Controllers Package

HTTP blueprints for single-player games and multiplayer rooms.
"""
