#!/usr/bin/env python3
"""Generate API documentation automatically."""

import os
import sys
sys.path.insert(0, os.path.abspath('../..'))

from sphinx.ext.autosummary.generate import generate_autosummary_docs

# List of modules to document
modules = [
    's2grid.cell',
    's2grid.cell_id',
    's2grid.face_ij',
    's2grid.lookup_tables',
    's2grid.coordinates.projection',
    's2grid.coordinates.cube_face',
    's2grid.coordinates.ellipsoid',
]

# Output directory for generated rst files
output_dir = 'api'

for module in modules:
    generate_autosummary_docs(
        [module],
        output_dir=output_dir,
        suffix='.rst',
        base_path='.'
    )

print("API documentation generated successfully!")
