"""
Chain four processes by hand: roll a plate, punch it, turn a pin, draw wire.

Each calculator is independent; the output of one step is fed into the
next by the caller. Results are collected into a project and exported.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from processcalc.calculator import (
    calculate_punching,
    calculate_rolling,
    calculate_turning,
    calculate_wire_drawing,
    optimize_clearance,
    to_summary,
)
from processcalc.io import (
    ExportData,
    Project,
    PunchingParameters,
    RollingParameters,
    TurningParameters,
    WireDrawingParameters,
    export_to_tsv,
    make_record,
    save_export_json,
)

print("="*70)
print("PROCESS CHAIN: ROLL -> PUNCH -> TURN -> DRAW")
print("="*70)
print()

# Hot band 20mm down to 10mm plate
rolling = RollingParameters(
    material="steel-low-carbon",
    initial_thickness=20.0,
    final_thickness=10.0,
    width=100.0,
    roll_diameter=300.0,
    rolling_speed=2.0,
    friction_coefficient=0.2,
)
rolled = calculate_rolling(rolling)
print(to_summary("rolling", rolled, rolling))
print()

# Punch the rolled plate at the recommended clearance
clearance = optimize_clearance("steel-mild", rolling.final_thickness)
print(f"Recommended clearance: {clearance.optimal:.2f}mm ({clearance.percentage:.1f}%)")
print()

punching = PunchingParameters(
    material="steel-mild",
    thickness=rolling.final_thickness,
    hole_diameter=10.0,
    punch_diameter=10.0,
    clearance=round(clearance.percentage, 1),
    punch_speed=100.0,
    temperature=25.0,
    lubrication=True,
)
punched = calculate_punching(punching)
print(to_summary("punching", punched, punching))
print()

# Turn a 10mm pin
turning = TurningParameters(
    material="steel-mild",
    diameter=punching.hole_diameter,
    length=50.0,
    cutting_speed=100.0,
    feed_rate=0.2,
    depth_of_cut=2.0,
    tool_material="hss",
    coolant=True,
)
turned = calculate_turning(turning)
print(to_summary("turning", turned, turning))
print()

# Draw 10mm rod down to 5mm wire in three passes
drawing = WireDrawingParameters(
    material="steel-low-carbon",
    initial_diameter=turning.diameter,
    final_diameter=5.0,
    drawing_speed=10.0,
    die_angle=8.0,
    number_of_passes=3,
    lubrication=True,
    temperature=25.0,
)
drawn = calculate_wire_drawing(drawing)
print(to_summary("wire-drawing", drawn, drawing))
print()

records = [
    make_record("rolling", rolling, rolled),
    make_record("punching", punching, punched),
    make_record("turning", turning, turned),
    make_record("wire-drawing", drawing, drawn),
]
project = Project(name="Bracket and pin", calculations=records, tags=["example"])

output_dir = os.path.join(os.path.dirname(__file__), 'output')
os.makedirs(output_dir, exist_ok=True)
json_path = save_export_json(
    ExportData(calculations=records, projects=[project]),
    os.path.join(output_dir, 'process_chain.json'),
)
tsv_path = export_to_tsv(records, os.path.join(output_dir, 'process_chain.tsv'))

print("="*70)
print(f"Exported: {json_path}")
print(f"Exported: {tsv_path}")
print("="*70)
