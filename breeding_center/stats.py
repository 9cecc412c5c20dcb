"""
stats – Session statistics and roster charts.

Provides:
  - Per-session counters (additions, training, level-ups, breeding)
  - Breeding success rate
  - Summary dict for the end-of-session report
  - Matplotlib level chart of the current roster
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, Optional

from breeding_center.config import EXPORT_DIR

if TYPE_CHECKING:
    from breeding_center.pokemon import Pokemon

logger = logging.getLogger(__name__)


# ── Session tracking ────────────────────────────────────────────────────────

@dataclass
class SessionStats:
    """Aggregated statistics for one breeding center session."""
    start_time: float = 0.0
    added: int = 0
    training_sessions: int = 0
    xp_awarded: int = 0
    level_ups: int = 0
    breeding_attempts: int = 0
    births: int = 0
    births_by_type: Dict[str, int] = field(default_factory=lambda: defaultdict(int))

    @property
    def elapsed_seconds(self) -> float:
        if self.start_time == 0:
            return 0.0
        return time.time() - self.start_time

    @property
    def breeding_success_rate(self) -> float:
        """Fraction of breeding attempts that produced an egg (0.0 to 1.0)."""
        return self.births / self.breeding_attempts if self.breeding_attempts > 0 else 0.0

    @property
    def breeding_rate_display(self) -> str:
        if self.breeding_attempts == 0:
            return "N/A"
        return f"{self.births}/{self.breeding_attempts} ({self.breeding_success_rate:.0%})"


class StatsTracker:
    """
    Records what happens in the breeding center during one session.

    The center calls the ``record_*`` hooks; the entry point prints
    :meth:`get_summary` on exit.
    """

    def __init__(self):
        self.session = SessionStats(start_time=time.time())

    def record_added(self) -> None:
        self.session.added += 1

    def record_training(self, xp: int, roster_size: int, level_ups: int) -> None:
        """Record one train-all pass handing *xp* to each of *roster_size* creatures."""
        self.session.training_sessions += 1
        self.session.xp_awarded += xp * roster_size
        self.session.level_ups += level_ups

    def record_breeding(self, offspring: Optional[Pokemon]) -> None:
        self.session.breeding_attempts += 1
        if offspring is not None:
            self.session.births += 1
            self.session.births_by_type[str(offspring.pokemon_type)] += 1

    def get_summary(self) -> dict:
        """Get a summary dict for display."""
        return {
            "pokemon_added": self.session.added,
            "training_sessions": self.session.training_sessions,
            "xp_awarded": self.session.xp_awarded,
            "level_ups": self.session.level_ups,
            "breeding_attempts": self.session.breeding_attempts,
            "breeding_success": self.session.breeding_rate_display,
            "births_by_type": dict(self.session.births_by_type),
            "elapsed": round(self.session.elapsed_seconds, 1),
        }

    def reset(self) -> None:
        """Reset all statistics."""
        self.session = SessionStats(start_time=time.time())


# ── Chart Generation (matplotlib) ───────────────────────────────────────────

def generate_level_chart(
    roster: Iterable[Pokemon],
    filepath: Optional[Path] = None,
) -> Optional[Path]:
    """Generate a bar chart of each creature's level, in roster order."""
    roster = list(roster)
    if not roster:
        return None

    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        logger.warning("matplotlib not installed; chart generation skipped")
        return None

    if filepath is None:
        EXPORT_DIR.mkdir(parents=True, exist_ok=True)
        filepath = EXPORT_DIR / "roster_levels.png"
    else:
        filepath.parent.mkdir(parents=True, exist_ok=True)

    labels = [f"#{i + 1} {p.name}" for i, p in enumerate(roster)]
    levels = [p.level for p in roster]

    fig, ax = plt.subplots(figsize=(10, max(2, 0.5 * len(roster))))
    ax.barh(labels, levels, color="#7c3aed")
    ax.set_xlabel("Level")
    ax.set_title("Breeding Center Roster")
    ax.set_facecolor("#0f0f0f")
    fig.patch.set_facecolor("#0f0f0f")
    ax.tick_params(colors="#94a3b8")
    ax.xaxis.label.set_color("#94a3b8")
    ax.title.set_color("#e2e8f0")
    for spine in ax.spines.values():
        spine.set_color("#334155")
    ax.invert_yaxis()

    fig.tight_layout()
    fig.savefig(filepath, dpi=100, facecolor="#0f0f0f")
    plt.close(fig)
    logger.info("Wrote roster chart to %s", filepath)
    return filepath
