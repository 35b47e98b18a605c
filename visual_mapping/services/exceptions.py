# visual_mapping/services/exceptions.py

class GraphDataError(ValueError):
    """Raised when a graph document cannot be parsed into GraphData."""
    pass

class MappingConfigError(ValueError):
    """Raised when a mapping configuration document is malformed."""
    pass
