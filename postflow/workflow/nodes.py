"""
Node builders for the "Get LinkedIn and Twitter Posts" workflow.

Each builder takes the Environment and falls back to a placeholder string when
a value is missing, so the generated JSON is always complete and can be fixed
up by hand inside n8n.
"""
from typing import List

from .environment import DEFAULT_SHEET_NAME, Environment
from .ids import generate_node_id
from .schema import (
    BodyParameter,
    BodyParameters,
    ColumnMapping,
    ColumnSchema,
    CredentialRef,
    GoogleSheetsNode,
    GoogleSheetsParameters,
    HttpRequestNode,
    HttpRequestParameters,
    ManualTriggerNode,
    NodeDescriptor,
    ResourceLocator,
)
from .topology import APPEND_ROW_NODE, HTTP_REQUEST_NODE, TRIGGER_NODE

PLACEHOLDER_APIFY_TOKEN = "YOUR_APIFY_TOKEN"
PLACEHOLDER_LINKEDIN_USERNAME = "YOUR_LINKEDIN_USERNAME"
PLACEHOLDER_GOOGLE_SHEET_ID = "YOUR_GOOGLE_SHEET_ID"

APIFY_ACTOR_URL = (
    "https://api.apify.com/v2/acts/apimaestro~linkedin-profile-posts/"
    "run-sync-get-dataset-items"
)
SHEET_GID = "gid=0"
GOOGLE_SHEETS_CREDENTIAL_TYPE = "googleSheetsOAuth2Api"

# sheet column -> n8n expression on the Apify dataset item
COLUMN_VALUES = {
    "Date": "={{ $json.posted_at.date }}",
    "URL": "={{ $json.url }}",
    "Text": "={{ $json.text }}",
    "Id": "={{ $json.full_urn }}",
}
SCHEMA_COLUMNS = ["Id", "Date", "Text", "URL"]


def create_nodes(env: Environment) -> List[NodeDescriptor]:
    """Trigger, HTTP call and sheet append, always in that order."""
    return [
        manual_trigger_node(),
        http_request_node(env),
        append_row_node(env),
    ]


def manual_trigger_node() -> ManualTriggerNode:
    return ManualTriggerNode(
        position=(0, 0),
        id=generate_node_id("manual-trigger"),
        name=TRIGGER_NODE,
    )


def http_request_node(env: Environment) -> HttpRequestNode:
    token = env.apify_token or PLACEHOLDER_APIFY_TOKEN
    username = env.linkedin_username or PLACEHOLDER_LINKEDIN_USERNAME
    return HttpRequestNode(
        parameters=HttpRequestParameters(
            method="POST",
            url=f"{APIFY_ACTOR_URL}?token={token}",
            send_body=True,
            body_parameters=BodyParameters(
                parameters=[BodyParameter(name="username", value=username)],
            ),
        ),
        position=(208, 0),
        id=generate_node_id("http-request"),
        name=HTTP_REQUEST_NODE,
    )


def sheet_url(sheet_id: str) -> str:
    return f"https://docs.google.com/spreadsheets/d/{sheet_id}/edit#{SHEET_GID}"


def append_row_node(env: Environment) -> GoogleSheetsNode:
    """
    Google Sheets "append" node.

    Credentials are attached only when both the credential id and its display
    name are set; with just one of them the node is left without credentials.
    """
    sheet_id = env.google_sheet_id or PLACEHOLDER_GOOGLE_SHEET_ID
    credentials = None
    if env.has_google_credential:
        credentials = {
            GOOGLE_SHEETS_CREDENTIAL_TYPE: CredentialRef(
                id=env.google_credential_id,
                name=env.google_credential_name,
            )
        }

    return GoogleSheetsNode(
        parameters=GoogleSheetsParameters(
            operation="append",
            document_id=ResourceLocator(value=sheet_id, mode="id"),
            sheet_name=ResourceLocator(
                value=SHEET_GID,
                mode="list",
                cached_result_name=env.google_sheet_name or DEFAULT_SHEET_NAME,
                cached_result_url=sheet_url(sheet_id),
            ),
            columns=ColumnMapping(
                value=dict(COLUMN_VALUES),
                column_schema=[ColumnSchema(id=col, display_name=col) for col in SCHEMA_COLUMNS],
            ),
        ),
        position=(448, 0),
        id=generate_node_id("google-sheets-append"),
        name=APPEND_ROW_NODE,
        credentials=credentials,
    )
