""" Generate workflow.json for import into n8n. """
from pathlib import Path

from postflow.integrations.n8n.exporter import write_workflow_json
from postflow.workflow.environment import read_environment

OUTPUT_FILE = "workflow.json"

NEXT_STEPS = [
    "Set your environment variables (APIFY_TOKEN, LINKEDIN_USERNAME, GOOGLE_SHEET_ID, etc.)",
    "Run: postflow-generate",
    f"Import {OUTPUT_FILE} into n8n",
]


def main() -> int:
    env = read_environment()
    write_workflow_json(env, Path.cwd() / OUTPUT_FILE)

    print("\nNext steps:")
    for i, step in enumerate(NEXT_STEPS, start=1):
        print(f"{i}. {step}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
