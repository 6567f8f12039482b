from pydantic import BaseModel, Field
from typing import Literal

from nodegraph.traversal import MAX_GRAPH_DEPTH


class TraversalConfig(BaseModel):
    max_depth: int = Field(default=MAX_GRAPH_DEPTH, ge=1)


class NodegraphConfig(BaseModel):
    traversal: TraversalConfig = Field(default_factory=TraversalConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
