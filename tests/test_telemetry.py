"""Unit tests for flight telemetry and plotting."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import polars as pl
import pytest
from numpy.testing import assert_allclose

from lander.plotting import plot_descent
from lander.simulation import Simulator
from lander.telemetry import FlightLog, record_flight


class TestFlightLog:
    """Test sampling and export."""

    def test_record_flight_samples(self):
        """Initial, every n-th and final states are recorded."""
        sim = Simulator(scenario=0)

        log = record_flight(sim, 10.0, every=10)

        assert len(log) == 11
        assert_allclose(log.column("time")[[0, -1]], [0.0, 10.0])
        assert_allclose(log.column("altitude")[0], 0.2 * 3386000.0)

    def test_final_state_recorded(self):
        """A run that stops between samples still ends on the final state."""
        sim = Simulator(scenario=1)

        log = record_flight(sim, 500.0, every=7)

        assert sim.touchdown is not None
        assert log.samples[-1]["time"] == sim.time

    def test_dataframe(self):
        """The log converts to a Polars DataFrame."""
        sim = Simulator(scenario=1)
        df = record_flight(sim, 1.0).to_dataframe()

        assert isinstance(df, pl.DataFrame)
        assert df.height == 11
        assert df["parachute"][0] == "NOT_DEPLOYED"
        assert df["descent_rate"][-1] > 0.0

    def test_empty_dataframe(self):
        """An empty log still has the full schema."""
        df = FlightLog(planet_radius=3386000.0).to_dataframe()
        assert df.height == 0
        assert "altitude" in df.columns

    def test_invalid_interval(self):
        """Sampling intervals below one tick are rejected."""
        with pytest.raises(ValueError):
            record_flight(Simulator(scenario=0), 1.0, every=0)


class TestPlotting:
    """Test descent plots."""

    def test_plot_descent(self):
        """The descent plot has four panels."""
        log = record_flight(Simulator(scenario=1), 20.0, every=5)

        fig = plot_descent(log, title="Test")

        assert len(fig.axes) == 4
        plt.close(fig)


class TestIntegerDuration:
    """Test integer inputs to the recorder."""

    def test_integer_duration(self):
        """Integer durations are accepted."""
        log = record_flight(Simulator(scenario=0), 1, every=5)
        assert len(log) == 3
        assert log.planet_radius == 3386000.0
