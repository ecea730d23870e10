"""
Exception types raised at the public edges of repoviz.

The graph computations themselves are total over their inputs; these
exceptions cover callers naming things that do not exist and collaborators
handing in unusable input.
"""


class RepovizError(Exception):
    """Base class for all repoviz errors."""


class NodeNotFoundError(RepovizError):
    """
    Raised when an operation names a node id the graph does not contain.

    Attributes:
        node_id: The unknown id.
    """

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node not found: {node_id}")


class InvalidRepositoryURL(RepovizError):
    """
    Raised when a repository URL cannot be split into owner and name.

    Attributes:
        url: The rejected URL.
    """

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid GitHub repository URL: {url}")


class DescriptorLoadError(RepovizError):
    """
    Raised when a descriptor listing cannot be loaded.

    Attributes:
        source: The file, directory or URL that failed.
        reason: Human-readable reason.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load descriptors from '{source}': {reason}")
