# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# add project root to sys.path for autodoc
import datetime
import os
import sys

sys.path.insert(0, os.path.abspath('../..'))

# Docs are built without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# -- Project information -----------------------------------------------------

project = 'StudentExpenses'
copyright = f'{datetime.date.today().year}, StudentExpenses contributors'
author = 'StudentExpenses contributors'
release = '0.1.0'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.autosectionlabel',
]

napoleon_google_docstring = True
napoleon_use_param = False
napoleon_use_ivar = False

pygments_style = 'vs'
pygments_dark_style = 'stata-dark'

templates_path = []
exclude_patterns = []

autodoc_default_options = {
    'member-order': 'groupwise',
    'show-inheritance': True,
}
autodoc_preserve_defaults = True
autosectionlabel_prefix_document = True

# -- Options for HTML output -------------------------------------------------

html_theme = 'furo'
html_theme_options = {
    'light_css_variables': {
        'color-brand-primary': 'rgba(60, 180, 125, 1)',
        'color-brand-content': 'rgba(60, 180, 125, 1)',
    },
    'dark_css_variables': {
        'color-brand-primary': 'rgba(90, 200, 155, 1)',
        'color-brand-content': 'rgba(90, 200, 155, 1)',
    },
    'navigation_with_keys': True,
}
highlight_language = 'python'

html_static_path = []
