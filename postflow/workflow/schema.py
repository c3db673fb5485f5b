""" Pydantic models for the n8n workflow document we generate. """
import json
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel


class N8nModel(BaseModel):
    # n8n speaks camelCase
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# -------------------------
# CONNECTIONS
# -------------------------

class Connection(N8nModel):
    node: str
    type: str = "main"
    index: int = 0


class NodeConnections(N8nModel):
    # one list per output port, each holding that port's edges
    main: List[List[Connection]] = Field(default_factory=lambda: [[]])


# -------------------------
# NODE PARAMETERS
# -------------------------

class ManualTriggerParameters(N8nModel):
    model_config = ConfigDict(extra="forbid")


class BodyParameter(N8nModel):
    name: str
    value: str


class BodyParameters(N8nModel):
    parameters: List[BodyParameter] = Field(default_factory=list)


class HttpRequestParameters(N8nModel):
    method: str = "POST"
    url: str
    send_body: bool = True
    body_parameters: BodyParameters = Field(default_factory=BodyParameters)
    options: Dict[str, Any] = Field(default_factory=dict)


class ResourceLocator(N8nModel):
    """ n8n "resource locator" value (document / sheet pickers). """
    rl: bool = Field(True, alias="__rl")
    value: str
    mode: str
    cached_result_name: Optional[str] = None
    cached_result_url: Optional[str] = None


class ColumnSchema(N8nModel):
    id: str
    display_name: str
    required: bool = False
    default_match: bool = False
    display: bool = True
    type: str = "string"
    can_be_used_to_match: bool = True


class ColumnMapping(N8nModel):
    mapping_mode: str = "defineBelow"
    value: Dict[str, str] = Field(default_factory=dict)
    matching_columns: List[str] = Field(default_factory=list)
    column_schema: List[ColumnSchema] = Field(default_factory=list, alias="schema")
    attempt_to_convert_types: bool = False
    convert_fields_to_string: bool = False


class GoogleSheetsParameters(N8nModel):
    operation: str = "append"
    document_id: ResourceLocator
    sheet_name: ResourceLocator
    columns: ColumnMapping
    options: Dict[str, Any] = Field(default_factory=dict)


# -------------------------
# NODES
# -------------------------

class CredentialRef(N8nModel):
    id: str
    name: str


class NodeDescriptor(N8nModel):
    parameters: Any
    type: str
    type_version: Union[int, float]
    position: Tuple[int, int]
    id: str
    name: str
    credentials: Optional[Dict[str, CredentialRef]] = None


class ManualTriggerNode(NodeDescriptor):
    parameters: ManualTriggerParameters = Field(default_factory=ManualTriggerParameters)
    type: Literal["n8n-nodes-base.manualTrigger"] = "n8n-nodes-base.manualTrigger"
    type_version: Union[int, float] = 1


class HttpRequestNode(NodeDescriptor):
    parameters: HttpRequestParameters
    type: Literal["n8n-nodes-base.httpRequest"] = "n8n-nodes-base.httpRequest"
    type_version: Union[int, float] = 4.2


class GoogleSheetsNode(NodeDescriptor):
    parameters: GoogleSheetsParameters
    type: Literal["n8n-nodes-base.googleSheets"] = "n8n-nodes-base.googleSheets"
    type_version: Union[int, float] = 4.7


WorkflowNode = Annotated[
    Union[ManualTriggerNode, HttpRequestNode, GoogleSheetsNode],
    Field(discriminator="type"),
]


# -------------------------
# WORKFLOW
# -------------------------

class WorkflowSettings(N8nModel):
    execution_order: str = "v1"


class WorkflowConfig(N8nModel):
    name: str
    active: bool = False
    settings: WorkflowSettings = Field(default_factory=WorkflowSettings)


class WorkflowDocument(N8nModel):
    name: str
    nodes: List[WorkflowNode] = Field(default_factory=list)
    pin_data: Dict[str, Any] = Field(default_factory=dict)
    connections: Dict[str, NodeConnections] = Field(default_factory=dict)
    active: bool = False
    settings: WorkflowSettings = Field(default_factory=WorkflowSettings)

    def to_dict(self) -> Dict[str, Any]:
        # exclude_none drops the credentials key on nodes that have none
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def load_workflow_json(text: str) -> WorkflowDocument:
    """Parse an exported workflow back into a WorkflowDocument."""
    try:
        return WorkflowDocument.model_validate_json(text)
    except ValidationError as e:
        raise ValueError(f"Workflow JSON validation error: {e}")


def check_connections(document: WorkflowDocument) -> None:
    """
    Make sure every connection points at a node in the document and that the
    graph has no cycles (Kahn's algorithm). The exporter never calls this.
    """
    names = [node.name for node in document.nodes]
    if len(names) != len(set(names)):
        raise ValueError("Duplicate node names in workflow.")
    indegree = {name: 0 for name in names}
    adjacency: Dict[str, List[str]] = {name: [] for name in names}

    for src, outputs in document.connections.items():
        if src not in indegree:
            raise ValueError(f"Connection from unknown node: {src}")
        for port in outputs.main:
            for edge in port:
                if edge.node not in indegree:
                    raise ValueError(f"Connection references unknown node: {src} -> {edge.node}")
                adjacency[src].append(edge.node)
                indegree[edge.node] += 1

    queue = [name for name, deg in indegree.items() if deg == 0]
    visited = 0
    while queue:
        current = queue.pop(0)
        visited += 1
        for neighbor in adjacency[current]:
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)

    if visited != len(indegree):
        raise ValueError("Cycle detected in workflow connections.")
