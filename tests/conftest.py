"""
Pytest configuration and shared fixtures for processcalc tests.

Each fixture returns a fresh dict of fully-populated parameters (snake_case)
that the matching calculator accepts without error. Tests copy and tweak
them with ``{**fixture, "field": value}``.
"""

import pytest


# ─── Forming ─────────────────────────────────────────────────────────────


@pytest.fixture
def rolling_params():
    """Single rolling pass, 10 -> 8 mm low-carbon steel strip."""
    return {
        "material": "steel-low-carbon",
        "initial_thickness": 10.0,
        "final_thickness": 8.0,
        "width": 100.0,
        "roll_diameter": 300.0,
        "rolling_speed": 60.0,
        "friction_coefficient": 0.3,
        "temperature": 20.0,
    }


@pytest.fixture
def forging_params():
    """Upsetting a 50 mm diameter billet from 100 to 60 mm on flat dies."""
    return {
        "material": "steel-low-carbon",
        "initial_height": 100.0,
        "final_height": 60.0,
        "diameter": 50.0,
        "friction_coefficient": 0.3,
        "die_type": "flat",
        "temperature": 20.0,
    }


# ─── Drawing ─────────────────────────────────────────────────────────────


@pytest.fixture
def wire_drawing_params():
    """Copper wire 5 -> 4.5 mm in one lubricated pass."""
    return {
        "material": "copper-c110",
        "initial_diameter": 5.0,
        "final_diameter": 4.5,
        "drawing_speed": 50.0,
        "die_angle": 8.0,
        "number_of_passes": 1,
        "lubrication": True,
        "temperature": 20.0,
    }


@pytest.fixture
def extrusion_params():
    """Aluminium billet 100 -> 20 mm, direct, hot, lubricated."""
    return {
        "material": "aluminum-1100",
        "billet_diameter": 100.0,
        "extruded_diameter": 20.0,
        "billet_length": 300.0,
        "extrusion_speed": 10.0,
        "die_angle": 45.0,
        "temperature": 400.0,
        "extrusion_type": "direct",
        "lubrication": True,
    }


# ─── Cutting ─────────────────────────────────────────────────────────────


@pytest.fixture
def punching_params():
    """10 mm hole in 2 mm mild steel at the 5% optimum clearance."""
    return {
        "material": "steel-mild",
        "thickness": 2.0,
        "hole_diameter": 10.0,
        "punch_diameter": 9.8,
        "clearance": 5.0,
        "punch_speed": 100.0,
        "temperature": 20.0,
        "lubrication": True,
    }


@pytest.fixture
def shearing_params():
    """1 m cut in 3 mm mild steel with a 4° raked blade."""
    return {
        "material": "steel-mild",
        "thickness": 3.0,
        "shear_length": 1000.0,
        "blade_angle": 4.0,
        "clearance": 8.0,
        "shear_speed": 50.0,
        "hold_down_force": 500000.0,
    }


# ─── Machining ───────────────────────────────────────────────────────────


@pytest.fixture
def turning_params():
    """50 mm mild steel bar, carbide at the recommended 150 m/min."""
    return {
        "material": "steel-mild",
        "diameter": 50.0,
        "length": 100.0,
        "cutting_speed": 150.0,
        "feed_rate": 0.2,
        "depth_of_cut": 2.0,
        "tool_material": "carbide",
        "coolant": True,
    }


@pytest.fixture
def milling_params():
    """Aluminium face mill, 4-tooth 20 mm carbide cutter."""
    return {
        "material": "aluminum-6061",
        "width": 10.0,
        "length": 100.0,
        "depth": 2.0,
        "cutter_diameter": 20.0,
        "number_of_teeth": 4,
        "spindle_speed": 5000.0,
        "feed_rate": 2000.0,
        "tool_material": "carbide",
    }


@pytest.fixture
def drilling_params():
    """8 mm hole, 20 mm deep, in mild steel with an HSS drill."""
    return {
        "material": "steel-mild",
        "hole_diameter": 8.0,
        "hole_depth": 20.0,
        "drill_speed": 900.0,
        "feed_rate": 0.15,
        "tool_material": "hss",
        "coolant": True,
    }
