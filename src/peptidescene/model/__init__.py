"""
The MODEL layer contains pure data structures.
It has NO knowledge of the scene collaborator or the Visualization (PyVista).
It deals with Geometry, Primitives and the Chain Registry.
"""
