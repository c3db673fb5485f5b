""" Environment-specific values injected into the generated workflow. """
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_SHEET_NAME = "Data"

# field name -> environment variable
ENV_KEYS: Dict[str, str] = {
    "apify_token": "APIFY_TOKEN",
    "linkedin_username": "LINKEDIN_USERNAME",
    "google_sheet_id": "GOOGLE_SHEET_ID",
    "google_sheet_name": "GOOGLE_SHEET_NAME",
    "google_credential_id": "GOOGLE_CREDENTIAL_ID",
    "google_credential_name": "GOOGLE_CREDENTIAL_NAME",
}


class Environment(BaseModel):
    """
    Optional per-instance values. Anything left as None is replaced by a
    placeholder (or a default) when the nodes are built.
    """
    model_config = ConfigDict(frozen=True)

    apify_token: Optional[str] = None
    linkedin_username: Optional[str] = None
    google_sheet_id: Optional[str] = None
    google_sheet_name: Optional[str] = None
    google_credential_id: Optional[str] = None
    google_credential_name: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if value is None:
            return None
        value = str(value)
        return value or None

    @property
    def has_google_credential(self) -> bool:
        return bool(self.google_credential_id and self.google_credential_name)


def read_environment(source: Optional[Mapping[str, Any]] = None) -> Environment:
    """
    Build an Environment from APIFY_TOKEN, LINKEDIN_USERNAME, GOOGLE_SHEET_ID,
    GOOGLE_SHEET_NAME, GOOGLE_CREDENTIAL_ID and GOOGLE_CREDENTIAL_NAME.

    `source` defaults to the process environment. Nothing is validated; the
    sheet name falls back to "Data".
    """
    if source is None:
        source = os.environ
    values = {field: source.get(key) for field, key in ENV_KEYS.items()}
    env = Environment(**values)
    if env.google_sheet_name is None:
        env = env.model_copy(update={"google_sheet_name": DEFAULT_SHEET_NAME})
    return env


def read_environment_file(path: Union[str, Path]) -> Environment:
    """ Read the same keys from a YAML mapping file. """
    raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Environment file must contain a mapping: {path}")
    return read_environment(raw)
