"""Domain layer: entities, value objects, the match scorer and the conflict checker.

Nothing here imports persistence, HTTP or configuration code.
"""
