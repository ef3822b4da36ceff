"""
Tests for the material registries and lookup.
"""

import pytest

from processcalc.exceptions import MaterialNotFoundError, ProcessCalcError
from processcalc.materials import (
    CUTTING_MATERIALS,
    DRAWING_MATERIALS,
    FORMING_MATERIALS,
    MACHINING_MATERIALS,
    REGISTRIES,
    list_materials,
    validate_material,
)
from processcalc.enums import ToolMaterial


class TestValidateMaterial:
    """Test registry lookup."""

    def test_known_key_returns_record(self):
        steel = validate_material(FORMING_MATERIALS, "steel-low-carbon")
        assert steel.flow_stress_coefficient == 530
        assert steel.strain_hardening_exponent == 0.26

    def test_unknown_key_raises(self):
        with pytest.raises(MaterialNotFoundError, match="Material not found"):
            validate_material(FORMING_MATERIALS, "unobtainium")

    def test_error_carries_key_and_registry(self):
        with pytest.raises(MaterialNotFoundError) as exc_info:
            validate_material(CUTTING_MATERIALS, "unobtainium", "cutting")
        assert exc_info.value.material == "unobtainium"
        assert exc_info.value.registry == "cutting"

    def test_error_is_lookup_error(self):
        """Callers can catch the stdlib base or the package base."""
        with pytest.raises(LookupError):
            validate_material(DRAWING_MATERIALS, "nope")
        with pytest.raises(ProcessCalcError):
            validate_material(DRAWING_MATERIALS, "nope")

    def test_unhashable_key_is_not_found(self):
        with pytest.raises(MaterialNotFoundError):
            validate_material(MACHINING_MATERIALS, ["steel-mild"])


class TestRegistries:
    """Test registry contents and independence."""

    def test_registries_are_read_only(self):
        with pytest.raises(TypeError):
            FORMING_MATERIALS["new"] = FORMING_MATERIALS["copper"]

    def test_records_are_frozen(self):
        copper = FORMING_MATERIALS["copper"]
        with pytest.raises(AttributeError):
            copper.yield_strength = 1

    def test_same_key_differs_across_registries(self):
        """aluminum-6061 is a separate record in each family."""
        forming = FORMING_MATERIALS["aluminum-6061"]
        cutting = CUTTING_MATERIALS["aluminum-6061"]
        assert hasattr(forming, "flow_stress_coefficient")
        assert not hasattr(cutting, "flow_stress_coefficient")
        assert hasattr(cutting, "shear_strength")

    def test_key_only_in_one_registry(self):
        assert "brass-360" in CUTTING_MATERIALS
        assert "brass-360" not in MACHINING_MATERIALS

    def test_registry_by_family(self):
        assert REGISTRIES["forming"] is FORMING_MATERIALS
        assert REGISTRIES["machining"] is MACHINING_MATERIALS
        assert set(REGISTRIES) == {"forming", "cutting", "drawing", "machining"}

    @pytest.mark.parametrize("registry", [
        FORMING_MATERIALS, CUTTING_MATERIALS, DRAWING_MATERIALS, MACHINING_MATERIALS,
    ])
    def test_every_record_has_a_name(self, registry):
        for key, material in registry.items():
            assert material.name, key


class TestRecommendedSpeeds:
    """Test per-tool recommended speed lookup."""

    def test_for_tool_enum(self):
        speeds = MACHINING_MATERIALS["steel-mild"].recommended_speed
        assert speeds.for_tool(ToolMaterial.CARBIDE) == 150

    def test_for_tool_string(self):
        speeds = MACHINING_MATERIALS["titanium-ti6al4v"].recommended_speed
        assert speeds.for_tool("hss") == 8

    def test_speeds_increase_with_tool_grade(self):
        for key, material in MACHINING_MATERIALS.items():
            s = material.recommended_speed
            assert s.hss < s.carbide < s.ceramic < s.diamond, key


class TestListMaterials:
    """Test key/name listing."""

    def test_pairs_in_registry_order(self):
        pairs = list_materials(DRAWING_MATERIALS)
        assert pairs[0] == ("steel-low-carbon", "Steel (Low Carbon)")
        assert [key for key, _ in pairs] == list(DRAWING_MATERIALS)
