"""Growth policy for StrVec backing arrays

Capacity grows by a constant factor with a small fixed head start:

    alloc_nr(x) = (x + min_alloc) * numerator // denominator

With the defaults (16, 3, 2) a sequence of N pushes triggers O(log N)
reallocations. The policy can be tuned from a YAML config file or from
CLI-style "key=value" specs.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import List

import yaml


@dataclass(frozen=True)
class GrowthPolicy:
    """Amortized growth parameters"""
    min_alloc: int = 16
    numerator: int = 3
    denominator: int = 2

    def __post_init__(self) -> None:
        if self.min_alloc < 1:
            raise ValueError(f"min_alloc must be >= 1, got {self.min_alloc}")
        if self.denominator < 1 or self.numerator <= self.denominator:
            raise ValueError(
                f"growth factor {self.numerator}/{self.denominator} must be greater than 1"
            )

    def alloc_nr(self, alloc: int) -> int:
        """Raw next capacity for a current capacity of ``alloc``"""
        return (alloc + self.min_alloc) * self.numerator // self.denominator

    def next_capacity(self, alloc: int, needed: int) -> int:
        """Capacity to reallocate to when ``needed`` slots don't fit

        Args:
            alloc: Current capacity (0 for the shared empty array)
            needed: Minimum number of slots required

        Returns:
            New capacity, strictly larger than ``alloc`` and >= ``needed``
        """
        grown = self.alloc_nr(alloc)
        return grown if grown >= needed else needed

    @classmethod
    def from_yaml(cls, path: Path) -> "GrowthPolicy":
        """Load policy from the ``growth:`` section of a YAML config file

        Args:
            path: Path to YAML config file

        Returns:
            Configured policy, or the default one when the file or
            section is missing
        """
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict) or not isinstance(config.get('growth'), dict):
            return cls()

        settings = config['growth']
        values = {}
        for key in ('min_alloc', 'numerator', 'denominator'):
            if key in settings:
                values[key] = int(settings[key])
        return cls(**values)

    def with_specs(self, specs: List[str]) -> "GrowthPolicy":
        """Override fields from CLI-style specs

        Parses specs like: ["min_alloc=8", "numerator=2"]. Unknown keys
        and specs without '=' are skipped.

        Args:
            specs: List of "key=value" strings

        Returns:
            New policy with the overrides applied
        """
        values = {}
        for spec in specs:
            if '=' not in spec:
                continue
            key, raw = spec.split('=', 1)
            key = key.strip()
            if key not in ('min_alloc', 'numerator', 'denominator'):
                continue
            try:
                values[key] = int(raw.strip())
            except ValueError:
                continue
        return replace(self, **values)

    @classmethod
    def from_specs(cls, specs: List[str]) -> "GrowthPolicy":
        """Build a policy from the defaults plus CLI-style specs"""
        return cls().with_specs(specs)


DEFAULT_POLICY = GrowthPolicy()
