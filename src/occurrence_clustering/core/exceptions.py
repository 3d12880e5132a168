class ClusteringError(Exception):
    """Base exception for occurrence clustering failures."""


class ConfigError(ClusteringError):
    """Raised when the configuration file cannot be used."""


class PolicyError(ClusteringError):
    """Raised when a relationship policy definition is invalid."""


class RecordLoadError(ClusteringError):
    """Raised when an input record cannot be loaded."""


class PipelineError(ClusteringError):
    """Raised when a batch comparison run fails."""
