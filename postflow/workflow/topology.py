""" Workflow metadata and node wiring. Neither depends on the environment. """
from typing import Dict

from .schema import Connection, NodeConnections, WorkflowConfig, WorkflowSettings

TRIGGER_NODE = "When clicking 'Execute workflow'"
HTTP_REQUEST_NODE = "HTTP Request"
APPEND_ROW_NODE = "Append row in sheet"

WORKFLOW_CONFIG = WorkflowConfig(
    name="Get LinkedIn and Twitter Posts",
    active=False,
    settings=WorkflowSettings(execution_order="v1"),
)

# trigger -> HTTP Request -> Append row in sheet. The last node keeps an
# empty output port so every node shows up as a key.
CONNECTIONS: Dict[str, NodeConnections] = {
    TRIGGER_NODE: NodeConnections(main=[[Connection(node=HTTP_REQUEST_NODE)]]),
    HTTP_REQUEST_NODE: NodeConnections(main=[[Connection(node=APPEND_ROW_NODE)]]),
    APPEND_ROW_NODE: NodeConnections(main=[[]]),
}


def workflow_config() -> WorkflowConfig:
    return WORKFLOW_CONFIG


def workflow_connections() -> Dict[str, NodeConnections]:
    # deep copy: the port lists inside the frozen models are still mutable
    return {name: conns.model_copy(deep=True) for name, conns in CONNECTIONS.items()}
