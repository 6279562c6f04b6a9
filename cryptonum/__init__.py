"""
Random big integer generation and Montgomery modular exponentiation.
"""

import logging

from .bigrand import *
from .distributions import *
from .monty import *
from .number_theory_stuff import *
from .source import *
from . import bigrand, distributions, monty, number_theory_stuff, source

__all__ = bigrand.__all__ + distributions.__all__ + monty.__all__ + number_theory_stuff.__all__ + source.__all__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1"
