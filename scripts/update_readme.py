from pathlib import Path

from commented_config.core.config_file import render_config
from commented_config.utils.comment_codec import encode_comments
from commented_config.utils.yaml_io import dump_document, parse_document


def update_readme():
    readme = Path("README.md")
    content = readme.read_text()

    example = Path("tests/data/example.yml").read_text()
    encoded, _ = encode_comments(example)
    saved = render_config(dump_document(parse_document(encoded)))

    # Define your snippets with markers
    snippets = {
        "example-encoded": encoded,
        "example-saved": saved,
    }

    # Replace content between markers
    for name, text in snippets.items():
        start_marker = f"<!-- CODE:{name}:START -->"
        end_marker = f"<!-- CODE:{name}:END -->"

        if start_marker in content and end_marker in content:
            before = content.split(start_marker)[0]
            after = content.split(end_marker)[1]
            content = f"{before}{start_marker}\n```yaml\n{text}```\n{end_marker}{after}"

    readme.write_text(content)
    return 0


if __name__ == "__main__":
    update_readme()
