"""Loading edge-list documents from TOML files."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError

from ._graph import DiGraph

logger = logging.getLogger(__name__)

# TOML booleans and floats are not nodes
type NodeValue = StrictInt | StrictStr


class GraphFileError(Exception):
    """Error reading or validating an edge-list file."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid graph file {path}: {reason}")


class GraphFile(BaseModel):
    """Schema of an edge-list document.

    Example:
        nodes = [6]
        edges = [[1, 2], [2, 3], [3, 5], [1, 4], [4, 5]]

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    nodes: list[NodeValue] = []
    edges: list[tuple[NodeValue, NodeValue]] = []

    def to_graph(self) -> DiGraph[NodeValue]:
        """Build a DiGraph with the listed edges, then the listed isolated nodes."""
        graph = DiGraph[NodeValue].from_edges(self.edges)
        for node in self.nodes:
            graph.add_node(node)
        return graph


def load_graph_file(path: Path) -> GraphFile:
    """Read and validate an edge-list TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        The validated GraphFile.

    Raises:
        GraphFileError: If the file is missing, is not valid TOML, or does not
            match the GraphFile schema.

    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise GraphFileError(path, "file not found") from e
    except tomllib.TOMLDecodeError as e:
        raise GraphFileError(path, f"invalid TOML: {e}") from e

    try:
        graph_file = GraphFile.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise GraphFileError(path, f"{location}: {first['msg']}") from e

    logger.debug(f"Read {len(graph_file.edges)} edges and {len(graph_file.nodes)} extra nodes from {path}")
    return graph_file


def load_graph(path: Path) -> DiGraph[NodeValue]:
    """Load a DiGraph from an edge-list TOML file.

    Raises:
        GraphFileError: See :func:`load_graph_file`.

    """
    graph = load_graph_file(path).to_graph()
    logger.debug(f"Loaded {graph!r} from {path}")
    return graph
