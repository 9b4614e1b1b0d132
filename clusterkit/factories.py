"""Factory functions for creating clusterers."""

from typing import Dict, Type

from .clustering import (
    Clusterer,
    ConnectedComponentsClusterer,
    DBSCANClusterer,
    OPTICSClusterer
)

from .config import (
    ALGORITHM_CONNECTED_COMPONENTS,
    ALGORITHM_DBSCAN,
    ALGORITHM_OPTICS,
    ClusteringConfig
)


# Registry of available components
CLUSTERERS: Dict[str, Type[Clusterer]] = {
    ALGORITHM_CONNECTED_COMPONENTS: ConnectedComponentsClusterer,
    ALGORITHM_DBSCAN: DBSCANClusterer,
    ALGORITHM_OPTICS: OPTICSClusterer
}


def get_clusterer(name: str, **kwargs) -> Clusterer:
    """
    Create clustering algorithm instance.

    Args:
        name: Algorithm name
        **kwargs: Algorithm-specific parameters

    Returns:
        Clusterer instance

    Raises:
        ValueError: If algorithm name is not recognized
    """
    if name not in CLUSTERERS:
        raise ValueError(
            f"Unknown clustering algorithm: {name}. "
            f"Available: {list(CLUSTERERS.keys())}"
        )

    return CLUSTERERS[name](**kwargs)


def clusterer_from_config(name: str, config: ClusteringConfig = None) -> Clusterer:
    """
    Create clustering algorithm instance from threshold configuration.

    Args:
        name: Algorithm name; also the config section holding its thresholds
        config: Clustering configuration (defaults if omitted)

    Returns:
        Clusterer instance
    """
    config = config or ClusteringConfig.default()
    section = getattr(config, name, None)
    params = vars(section) if section is not None else {}
    return get_clusterer(name, **params)


def register_clusterer(name: str, clusterer_class: type) -> None:
    """Register new clustering algorithm."""
    if not isinstance(clusterer_class, type) or not issubclass(clusterer_class, Clusterer):
        raise TypeError(f"{clusterer_class} must inherit from Clusterer")
    CLUSTERERS[name] = clusterer_class
