# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact arbitrary-precision rational number arithmetic."""


from .bigrational import (
    BigRational, E, NEGATIVE_ONE, ONE, ONE_HALF, PI, TAU, ZERO)
from .numfmt import (
    INVARIANT, NumberFormat, get_dflt_number_format, get_dflt_precision,
    set_dflt_number_format, set_dflt_precision)
from .rounding import Rounding, get_dflt_rounding_mode, set_dflt_rounding_mode
from .version import version_tuple as __version__  # noqa: F401

# define public namespace
__all__ = [
    'BigRational',
    'E',
    'INVARIANT',
    'NEGATIVE_ONE',
    'NumberFormat',
    'ONE',
    'ONE_HALF',
    'PI',
    'Rounding',
    'TAU',
    'ZERO',
    'get_dflt_number_format',
    'get_dflt_precision',
    'get_dflt_rounding_mode',
    'set_dflt_number_format',
    'set_dflt_precision',
    'set_dflt_rounding_mode',
]
