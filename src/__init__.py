"""Structured Errors built from typed Fragments"""

### Library Imports
from .errors import *
###
