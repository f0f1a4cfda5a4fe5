from __future__ import annotations

from typing import Tuple


MUSHROOM_ATTRIBUTES: Tuple[str, ...] = (
    "cap-shape",
    "cap-surface",
    "cap-color",
    "bruises",
    "odor",
    "gill-attachment",
    "gill-spacing",
    "gill-size",
    "gill-color",
    "stalk-shape",
    "stalk-root",
    "stalk-surface-above-ring",
    "stalk-surface-below-ring",
    "stalk-color-above-ring",
    "stalk-color-below-ring",
    "veil-type",
    "veil-color",
    "ring-number",
    "ring-type",
    "spore-print-color",
    "population",
    "habitat",
)

# Value order matters: it fixes the child position of every split.
MUSHROOM_DOMAINS: Tuple[Tuple[str, ...], ...] = (
    ("bell", "conical", "convex", "flat", "knobbed", "sunken"),
    ("fibrous", "grooves", "scaly", "smooth"),
    (
        "brown",
        "buff",
        "cinnamon",
        "gray",
        "green",
        "pink",
        "purple",
        "red",
        "white",
        "yellow",
    ),
    ("bruises", "no"),
    (
        "almond",
        "anise",
        "creosote",
        "fishy",
        "foul",
        "musty",
        "none",
        "pungent",
        "spicy",
    ),
    ("attached", "descending", "free", "notched"),
    ("close", "crowded", "distant"),
    ("broad", "narrow"),
    (
        "black",
        "brown",
        "buff",
        "chocolate",
        "gray",
        "green",
        "orange",
        "pink",
        "purple",
        "red",
        "white",
        "yellow",
    ),
    ("enlarging", "tapering"),
    ("bulbous", "club", "cup", "equal", "rhizomorphs", "rooted", "?"),
    ("fibrous", "scaly", "silky", "smooth"),
    ("fibrous", "scaly", "silky", "smooth"),
    (
        "brown",
        "buff",
        "cinnamon",
        "gray",
        "orange",
        "pink",
        "red",
        "white",
        "yellow",
    ),
    (
        "brown",
        "buff",
        "cinnamon",
        "gray",
        "orange",
        "pink",
        "red",
        "white",
        "yellow",
    ),
    ("partial", "universal"),
    ("brown", "orange", "white", "yellow"),
    ("none", "one", "two"),
    (
        "cobwebby",
        "evanescent",
        "flaring",
        "large",
        "none",
        "pendant",
        "sheathing",
        "zone",
    ),
    (
        "black",
        "brown",
        "buff",
        "chocolate",
        "green",
        "orange",
        "purple",
        "white",
        "yellow",
    ),
    ("abundant", "clustered", "numerous", "scattered", "several", "solitary"),
    ("grasses", "leaves", "meadows", "paths", "urban", "waste", "woods"),
)
