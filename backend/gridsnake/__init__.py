"""
Grid snake game: a deterministic engine plus the services that drive it.
"""
