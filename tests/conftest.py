# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Shared pytest fixtures."""

import pytest

from bigrational import (
    NumberFormat, Rounding, set_dflt_number_format, set_dflt_precision,
    set_dflt_rounding_mode)


@pytest.fixture(scope="session",
                params=[rnd.name for rnd in Rounding],
                ids=[rnd.name for rnd in Rounding])
def rnd(request) -> Rounding:
    return Rounding[request.param]


def dflt_round(rnd):
    @pytest.fixture()
    def closure():
        token = set_dflt_rounding_mode(rnd)
        yield
        token.var.reset(token)
    return closure


with_round_half_up = dflt_round(Rounding.ROUND_HALF_UP)
with_round_half_even = dflt_round(Rounding.ROUND_HALF_EVEN)


@pytest.fixture()
def with_comma_format():
    token = set_dflt_number_format(NumberFormat(',', '.'))
    yield
    token.var.reset(token)


@pytest.fixture()
def with_precision_5():
    token = set_dflt_precision(5)
    yield
    token.var.reset(token)
