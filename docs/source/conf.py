import os
import sys
sys.path.insert(0, os.path.abspath('../..'))
# Sphinx configuration for the s2grid API reference.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

project = 's2grid'
copyright = '2026, s2grid developers'
author = 's2grid developers'

extensions = ["numpydoc",
              'sphinx.ext.autodoc',
              'sphinx.ext.autosummary']

autosummary_generate = True
autosummary_generate_overwrite = False

# jaxtyping aliases render poorly in signatures
autodoc_typehints = "description"
numpydoc_show_class_members = False
numpydoc_class_members_toctree = False

templates_path = ['_templates']
exclude_patterns = []

html_theme = 'alabaster'
html_static_path = ['_static']


def setup(app):
    """Generate API docs automatically."""
    import subprocess
    subprocess.run([sys.executable, 'generate_docs.py'], cwd=os.path.dirname(os.path.abspath(__file__)))
