"""Integration tests for the tokens and inline commands"""

import json

from mdterm.cli.cli import app


def test_tokens_outputs_json(runner, tmp_path):
    (tmp_path / "doc.md").write_text("## Title\n\n```py\nx\n```\n")
    result = runner.invoke(app, ["tokens", "doc.md"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [
        {
            "kind": "header",
            "content": "Title",
            "children": [{"kind": "text", "content": "Title"}],
            "metadata": {"level": 2},
        },
        {"kind": "code_block", "content": "x", "metadata": {"language": "py"}},
    ]


def test_tokens_indent_option(runner, tmp_path):
    (tmp_path / "doc.md").write_text("para")
    compact = runner.invoke(app, ["tokens", "doc.md", "--indent", "0"])
    assert compact.output.count("\n") == 1
    indented = runner.invoke(app, ["tokens", "doc.md", "--indent", "4"])
    assert '\n    {' in indented.output


def test_tokens_empty_document(runner, tmp_path):
    (tmp_path / "doc.md").write_text("")
    result = runner.invoke(app, ["tokens", "doc.md"])
    assert result.exit_code == 0
    assert json.loads(result.output) == []


def test_tokens_stdin(runner):
    result = runner.invoke(app, ["tokens", "-"], input="- [a](b)")
    item = json.loads(result.output)[0]
    assert item["metadata"] == {"indent": 0, "ordered": False}
    assert item["children"] == [{"kind": "link", "content": "a", "metadata": {"url": "b"}}]


def test_tokens_rejects_multi_file_directory(runner, tmp_path):
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "b.md").write_text("b")
    result = runner.invoke(app, ["tokens", "."])
    assert result.exit_code == 1
    assert "pass a single file" in result.output


def test_inline_command(runner):
    result = runner.invoke(app, ["inline", "Use `**x**` now"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [
        {"kind": "text", "content": "Use "},
        {"kind": "inline_code", "content": "**x**"},
        {"kind": "text", "content": " now"},
    ]
