"""
Global configuration for the breeding center.
All paths, constants, and tunable parameters live here.
"""

from pathlib import Path

# ── Paths ────────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
EXPORT_DIR = ROOT_DIR / "exports"

# ── Progression ──────────────────────────────────────────────────────────────
XP_PER_LEVEL = 100
STARTING_LEVEL = 1

# ── Input limits ─────────────────────────────────────────────────────────────
# Largest values the shell accepts: unsigned 32-bit for menu choices and XP,
# unsigned 64-bit for roster indices.
MAX_XP_INPUT = 0xFFFF_FFFF
MAX_INDEX_INPUT = 0xFFFF_FFFF_FFFF_FFFF

# ── Breeding ─────────────────────────────────────────────────────────────────
BREEDING_MIN_LEVEL = 5
OFFSPRING_NAME = "Mystery"

# Roster the center opens with: (name, type label, gender label)
STARTER_ROSTER = [
    ("Pikachu", "Electric", "Male"),
    ("Raichu", "Electric", "Female"),
    ("Charizard", "Fire", "Male"),
    ("Venusaur", "Grass", "Female"),
]

# ── Display ──────────────────────────────────────────────────────────────────
DISPLAY_SEPARATOR = "-----------------------"

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
