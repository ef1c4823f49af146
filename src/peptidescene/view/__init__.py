"""
The VIEW layer receives primitives from the translator.
`scene` defines the registration protocol; `pyvista_scene` renders it.
"""
