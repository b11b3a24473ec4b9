"""
config/jobs.py
──────────────────────────────────────────────────────────────────────────────
The default job catalog, in classification priority order.

Each entry carries its own keyword patterns, so adding a job means adding one
entry here; the classifier and scorer need no changes.  When a description
matches several entries, the one declared first wins.

Difficulty is 1 (trivial) to 10 (expert) and describes the task itself, not
the person doing it.
"""
from __future__ import annotations

from checkajob.domain.models import JobDefinition, RiskFlags

DEFAULT_JOBS: tuple[JobDefinition, ...] = (
    JobDefinition(
        key="hang_shelf",
        name="Hang a Wall Shelf",
        base_difficulty=4,
        risk=RiskFlags(),
        keywords=("shelf", "bracket", "wall anchor"),
        steps=(
            "Locate studs or use appropriate wall anchors for your wall type.",
            "Measure and mark level bracket positions.",
            "Pre-drill pilot holes.",
            "Fix brackets securely.",
            "Place shelf and secure per instructions.",
            "Load gradually and check for level.",
        ),
        tools=(
            "Drill/driver",
            "Level",
            "Tape measure",
            "Stud finder (or tapping method)",
            "Screwdriver",
        ),
        materials=("Wall plugs/anchors", "Screws", "Shelf + brackets"),
        safety=(
            "Wear eye protection when drilling.",
            "Use anchors that match wall type and load.",
        ),
    ),
    JobDefinition(
        key="replace_tap_washer",
        name="Replace a Tap Washer",
        base_difficulty=5,
        risk=RiskFlags(plumbing=True),
        keywords=("tap", "washer", r"o\s?ring"),
        steps=(
            "Isolate water supply (shut-off valve).",
            "Open tap to relieve pressure.",
            "Disassemble tap handle and bonnet.",
            "Replace washer/O-ring with matching size.",
            "Reassemble and restore water.",
            "Check for leaks.",
        ),
        tools=("Adjustable spanner", "Screwdrivers", "Plumber's grease", "Allen keys"),
        materials=("Correct size washer/O-ring",),
        safety=(
            "Double-check isolation valves.",
            "Protect chrome surfaces to avoid scratching.",
        ),
    ),
    JobDefinition(
        key="paint_wall",
        name="Paint an Interior Wall",
        base_difficulty=3,
        risk=RiskFlags(),
        keywords=("paint", "roller", "brush"),
        steps=(
            "Fill holes and sand smooth; dust off.",
            "Mask edges and cover floors/furniture.",
            "Cut in edges with brush.",
            "Roll first coat top-to-bottom.",
            "Allow to dry; apply second coat.",
            "Remove tape before fully dry for clean lines.",
        ),
        tools=(
            "Roller + tray",
            'Brush (2")',
            "Filler + sanding block",
            "Dust sheet",
            "Masking tape",
        ),
        materials=("Emulsion paint", "Filler"),
        safety=(
            "Ventilate the room.",
            "Use a stable step if needed; don't overreach.",
        ),
    ),
    JobDefinition(
        key="fit_light_fixture",
        name="Fit a New Ceiling Light Fixture",
        base_difficulty=7,
        risk=RiskFlags(electrical=True, working_at_height=True),
        keywords=("light", "fixture", "ceiling"),
        steps=(
            "Isolate circuit at consumer unit and verify dead.",
            "Note existing wiring configuration.",
            "Connect live/neutral/earth per manufacturer and local regs.",
            "Mount fixture securely.",
            "Restore power and test.",
        ),
        tools=("Voltage tester", "Screwdrivers", "Wire strippers", "Step ladder"),
        materials=("Connector blocks/Wago", "Light fixture", "Fixings"),
        safety=(
            "If unsure about wiring identification or regs, use a qualified electrician.",
            "Always prove dead before touching conductors.",
        ),
    ),
)
