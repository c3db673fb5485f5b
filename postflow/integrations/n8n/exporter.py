from pathlib import Path
from typing import Union

from postflow.workflow.environment import Environment
from postflow.workflow.nodes import create_nodes
from postflow.workflow.schema import WorkflowDocument
from postflow.workflow.topology import workflow_config, workflow_connections


def build_workflow(env: Environment) -> WorkflowDocument:
    """
    Put metadata, nodes and connections together into one n8n workflow.
    Connection names are not cross-checked against the nodes here.
    """
    config = workflow_config()
    return WorkflowDocument(
        name=config.name,
        nodes=create_nodes(env),
        pin_data={},
        connections=workflow_connections(),
        active=config.active,
        settings=config.settings,
    )


def export_workflow_json(env: Environment) -> str:
    """ Indented JSON ready to import into n8n. """
    return build_workflow(env).to_json(indent=2)


def write_workflow_json(env: Environment, json_path: Union[str, Path]) -> Path:
    json_path = Path(json_path)
    json_path.write_text(export_workflow_json(env), encoding="utf-8")
    print(f"Wrote n8n workflow to {json_path}")
    return json_path
