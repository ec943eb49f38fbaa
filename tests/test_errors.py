# -*- coding: utf-8 -*-
"""Tests for errors module."""

import pytest

from cavenet.errors import DecompositionError
from cavenet.errors import NetworkConsistencyError
from cavenet.errors import NoFixedPointError


class TestDecompositionError:
    def test_message_only(self):
        error = DecompositionError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.station is None
        assert str(error) == "Something went wrong"

    def test_with_station(self):
        error = NetworkConsistencyError("Station has no legs", station="A12")
        assert error.station == "A12"
        assert str(error) == "Station has no legs (at station `A12`)"

    def test_hierarchy(self):
        assert issubclass(NoFixedPointError, DecompositionError)
        assert issubclass(NetworkConsistencyError, DecompositionError)
        assert not issubclass(NoFixedPointError, NetworkConsistencyError)

    def test_no_fixed_point_default_message(self):
        with pytest.raises(DecompositionError, match="No fixed points in the network"):
            raise NoFixedPointError
