# sassimport/core/__init__.py
"""
Import resolution core: candidate building, single-file resolution, glob
expansion and materialization of resolved files.
"""
