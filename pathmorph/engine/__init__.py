"""pathmorph interpolation engine."""

from pathmorph.engine.extender import extend_commands
from pathmorph.engine.interpolator import PathInterpolator, interpolate_path
from pathmorph.engine.reconciler import reconcile_command, reconcile_commands
from pathmorph.engine.splitter import de_casteljau, segments_to_commands, split_curve

__all__ = [
    "PathInterpolator",
    "de_casteljau",
    "extend_commands",
    "interpolate_path",
    "reconcile_command",
    "reconcile_commands",
    "segments_to_commands",
    "split_curve",
]
