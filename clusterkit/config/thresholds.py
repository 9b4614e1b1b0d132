"""Threshold configuration for clustering algorithms."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class ConnectedComponentsThresholds:
    """Thresholds for connected components."""
    range: float = math.inf


@dataclass
class DBSCANThresholds:
    """Thresholds for DBSCAN."""
    range: float = 1.0
    min_points: int = 2


@dataclass
class OPTICSThresholds:
    """Thresholds for OPTICS."""
    range: float = 1.0
    min_points: int = 2


@dataclass
class ClusteringConfig:
    """Complete clustering configuration."""
    connected_components: ConnectedComponentsThresholds = field(
        default_factory=ConnectedComponentsThresholds
    )
    dbscan: DBSCANThresholds = field(default_factory=DBSCANThresholds)
    optics: OPTICSThresholds = field(default_factory=OPTICSThresholds)

    @classmethod
    def default(cls) -> 'ClusteringConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClusteringConfig':
        """
        Build configuration from a nested dictionary.

        Unknown sections and keys are ignored so partial dictionaries
        only override what they name.

        Args:
            data: Mapping of algorithm name to threshold values

        Returns:
            ClusteringConfig instance
        """
        config = cls.default()

        for section_name, values in data.items():
            section = getattr(config, section_name, None)
            if section is None or not isinstance(values, dict):
                continue
            for key, value in values.items():
                if hasattr(section, key):
                    setattr(section, key, value)

        return config

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            'connected_components': {
                'range': self.connected_components.range,
            },
            'dbscan': {
                'range': self.dbscan.range,
                'min_points': self.dbscan.min_points,
            },
            'optics': {
                'range': self.optics.range,
                'min_points': self.optics.min_points,
            }
        }
