""" Example: build the n8n workflow from a YAML env file instead of environment variables. """
from pathlib import Path
from postflow.integrations.n8n.exporter import write_workflow_json
from postflow.workflow.environment import read_environment_file


def main():
    env_path = "examples/workflow_env.example.yaml"
    out_json_path = "linkedin_posts_workflow.json"
    env = read_environment_file(Path(env_path))
    write_workflow_json(env, Path(out_json_path))


if __name__ == '__main__':
    main()
