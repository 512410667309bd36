# File: building_shell_generator/__init__.py
"""
Building Shell Generator.

Procedurally generates a rectangular single-story building shell (walls,
door and window openings, gable roof) in a BIM host application.

Packages:
    geometry: host-free footprint, opening and roof geometry
    config: display units and shell parameters
    core: errors, shell planning, JSON serialization
    host: host adapter interface and the Revit implementation
    commands: the shell creation command
"""

__version__ = "0.3.0"
