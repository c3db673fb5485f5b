"""Tests for workflow document loading and connection checks."""

import pytest
from postflow.integrations.n8n.exporter import build_workflow
from postflow.workflow.environment import Environment
from postflow.workflow.schema import (
    Connection,
    NodeConnections,
    ResourceLocator,
    check_connections,
    load_workflow_json,
)


def _with_connections(connections):
    document = build_workflow(Environment())
    return document.model_copy(update={"connections": connections})


def test_resource_locator_alias():
    locator = ResourceLocator(value="abc", mode="id")
    assert locator.model_dump(by_alias=True, exclude_none=True) == {
        "__rl": True,
        "value": "abc",
        "mode": "id",
    }


def test_load_rejects_bad_json():
    with pytest.raises(ValueError, match="Workflow JSON validation error"):
        load_workflow_json("{not json")


def test_load_rejects_unknown_node_type():
    text = """
    {
      "name": "x",
      "nodes": [
        {"parameters": {}, "type": "n8n-nodes-base.noOp", "typeVersion": 1,
         "position": [0, 0], "id": "node-1", "name": "No Op"}
      ],
      "pinData": {},
      "connections": {},
      "active": false,
      "settings": {"executionOrder": "v1"}
    }
    """
    with pytest.raises(ValueError):
        load_workflow_json(text)


def test_load_minimal_document():
    document = load_workflow_json('{"name": "empty"}')
    assert document.name == "empty"
    assert document.nodes == []
    assert document.pin_data == {}
    assert document.settings.execution_order == "v1"


def test_check_connections_unknown_destination():
    document = _with_connections({
        "HTTP Request": NodeConnections(main=[[Connection(node="Send email")]]),
    })
    with pytest.raises(ValueError, match="unknown node: HTTP Request -> Send email"):
        check_connections(document)


def test_check_connections_unknown_source():
    document = _with_connections({"Renamed": NodeConnections()})
    with pytest.raises(ValueError, match="Connection from unknown node: Renamed"):
        check_connections(document)


def test_check_connections_cycle():
    document = _with_connections({
        "HTTP Request": NodeConnections(main=[[Connection(node="Append row in sheet")]]),
        "Append row in sheet": NodeConnections(main=[[Connection(node="HTTP Request")]]),
    })
    with pytest.raises(ValueError, match="Cycle detected"):
        check_connections(document)


def test_check_connections_fan_out_is_fine():
    document = _with_connections({
        "When clicking 'Execute workflow'": NodeConnections(main=[[
            Connection(node="HTTP Request"),
            Connection(node="Append row in sheet"),
        ]]),
    })
    check_connections(document)


def test_check_connections_duplicate_names():
    document = build_workflow(Environment())
    nodes = list(document.nodes)
    clone = nodes[1].model_copy(update={"id": "node-copy"})
    document = document.model_copy(update={"nodes": nodes + [clone]})
    with pytest.raises(ValueError, match="Duplicate node names"):
        check_connections(document)
