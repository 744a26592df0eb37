"""
Testhead Fixture Profiles

Defines the geometry and probe rules of a testhead: the unit conversion from
the pick-and-place export, the anchor the board is centred on, the proximity
thresholds that pick a probe size, and the hole radii emitted per feature.

Profiles can be customised with a YAML file whose keys override the standard
profile, e.g.:

```yaml
name: testhead_wide
anchor_x: 4.0
close_pitch_threshold: 0.09
```
"""

from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..errors import ProfileError
from ..placement.records import ProbeClass


@dataclass(frozen=True)
class FixtureProfile:
    """Geometry and probe rules for a testhead."""

    name: str
    description: str = ""

    # Input mil -> output inch
    scale_divisor: float = 1000.0

    # Board centroid lands here (inches)
    anchor_x: float = 3.5
    anchor_y: float = 3.0

    # Proximity rules (inches)
    close_pitch_threshold: float = 0.085  # below: use 075 probes
    min_probe_spacing: float = 0.068  # below: too close even for 075 probes

    # Hole radii (inches)
    standard_radius: float = 0.068
    close_pitch_radius: float = 0.05511811
    tooling_hole_radius: float = 0.190  # 'D' designators
    alignment_pin_radius: float = 0.245  # 'E' designators
    screw_radius: float = 0.25  # 'S' designators, named output only
    pad_radius: float = 0.125  # 'P' designators, named output only

    @property
    def anchor(self):
        return (self.anchor_x, self.anchor_y)

    def base_radius(self, probe_class: ProbeClass) -> float:
        """Radius implied by the probe class alone."""
        if probe_class is ProbeClass.CLOSE_PITCH:
            return self.close_pitch_radius
        return self.standard_radius

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  base: Optional["FixtureProfile"] = None) -> "FixtureProfile":
        """
        Build a profile from a mapping, layered over a base profile.

        Raises:
            ProfileError: On unknown keys or non-numeric values
        """
        base = base or TESTHEAD_STANDARD
        known = {f.name: f for f in fields(cls)}

        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ProfileError(f"Unknown profile keys: {', '.join(unknown)}")

        values = base.to_dict()
        for key, value in data.items():
            if known[key].type in (float, "float"):
                try:
                    value = float(value)
                except (TypeError, ValueError):
                    raise ProfileError(f"Profile key '{key}' must be a number, got {value!r}") from None
            else:
                value = str(value)
            values[key] = value

        return cls(**values)


TESTHEAD_STANDARD = FixtureProfile(
    name="testhead_standard",
    description="7 x 6 inch testhead plate with 100/075 mil probes",
)

# Profile registry
PROFILES: Dict[str, FixtureProfile] = {
    "testhead_standard": TESTHEAD_STANDARD,
}


def get_profile(name: str) -> FixtureProfile:
    """
    Get fixture profile by name.

    Raises:
        ProfileError: If profile name is not found
    """
    if name not in PROFILES:
        available = ", ".join(sorted(PROFILES.keys()))
        raise ProfileError(f"Unknown fixture profile '{name}'. Available: {available}")
    return PROFILES[name]


def list_profiles() -> List[str]:
    """List all available fixture profile names."""
    return sorted(PROFILES.keys())


def load_profile(path: Union[str, Path],
                 base: Optional[FixtureProfile] = None) -> FixtureProfile:
    """
    Load a fixture profile from a YAML file.

    Args:
        path: YAML file with profile keys to override
        base: Profile the overrides are applied to (default: testhead_standard)

    Raises:
        ProfileError: If the file is missing, a symlink, or malformed
    """
    path = Path(path)

    if not path.exists():
        raise ProfileError(f"Profile file not found: {path}")

    # Security: Check for symlinks to prevent reading unintended files
    if path.is_symlink():
        raise ProfileError(f"Profile file cannot be a symlink: {path}")

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProfileError(f"Invalid YAML in profile {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ProfileError(f"Profile {path} must contain a mapping")

    return FixtureProfile.from_dict(data, base=base)


def dump_profile(profile: FixtureProfile) -> str:
    """Serialize a profile to YAML."""
    return yaml.dump(profile.to_dict(), default_flow_style=False, sort_keys=False)
