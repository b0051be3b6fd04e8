"""Tests for EditRewriter."""

import asyncio
import logging

import pytest

from gfmlinks.api.editor.EditorPosition import EditorPosition
from gfmlinks.api.editor.EditRewriter import EDIT_LINK_PATTERN, EditRewriter
from gfmlinks.api.link.LinkTranslator import LinkTranslator
from gfmlinks.api.vault.FilesystemVault import FilesystemVault


@pytest.fixture
def rewriter(vault):
    return EditRewriter(LinkTranslator(vault))


def test_rewrites_typed_heading_text(rewriter, make_editor):
    editor = make_editor(["See [x](#Plumbing%20Notes)"], file_path="note.md")
    assert asyncio.run(rewriter.on_editor_change(editor, None)) is True
    assert editor.lines == ["See [x](#plumbing-notes)"]
    replacement, start, end = editor.replacements[0]
    assert (replacement, start, end) == ("plumbing-notes", EditorPosition(0, 9), EditorPosition(0, 25))


def test_rewrites_relative_target(rewriter, make_editor):
    editor = make_editor(["[x](../plumbing.md#Pipes%20%26%20Fittings)"], file_path="notes/sub/child.md")
    assert asyncio.run(rewriter.on_editor_change(editor, None)) is True
    assert editor.lines == ["[x](../plumbing.md#pipes-fittings)"]


def test_rewrites_undecoded_text(rewriter, make_editor):
    editor = make_editor(["[x](#Plumbing Notes)"], file_path="note.md")
    assert asyncio.run(rewriter.on_editor_change(editor, None)) is True
    assert editor.lines == ["[x](#plumbing-notes)"]


def test_text_after_cursor_is_preserved(rewriter, make_editor):
    line = "[x](#Plumbing%20Notes) and more"
    editor = make_editor([line], cursor=EditorPosition(0, line.index(")") + 1), file_path="note.md")
    assert asyncio.run(rewriter.on_editor_change(editor, None)) is True
    assert editor.lines == ["[x](#plumbing-notes) and more"]


def test_only_link_at_cursor_is_rewritten(rewriter, make_editor):
    editor = make_editor(["[a](#Plumbing%20Notes) [b](#Plumbing%20Notes)"], file_path="note.md")
    asyncio.run(rewriter.on_editor_change(editor, None))
    assert editor.lines == ["[a](#Plumbing%20Notes) [b](#plumbing-notes)"]


def test_cursor_not_after_link_is_noop(rewriter, make_editor):
    editor = make_editor(["[x](#Plumbing%20Notes) more"], file_path="note.md")
    assert asyncio.run(rewriter.on_editor_change(editor, None)) is False
    assert editor.replacements == []


def test_already_slug_is_noop(rewriter, make_editor, vault):
    editor = make_editor(["[x](#plumbing-notes)"], file_path="note.md")
    assert asyncio.run(rewriter.on_editor_change(editor, None)) is False
    assert vault.reads == ["note.md"]


def test_unknown_heading_is_noop(rewriter, make_editor):
    editor = make_editor(["[x](#Nothing%20Here)"], file_path="note.md")
    assert asyncio.run(rewriter.on_editor_change(editor, None)) is False


def test_missing_target_warns(rewriter, make_editor, caplog):
    editor = make_editor(["[x](missing.md#Heading)"], file_path="note.md")
    with caplog.at_level(logging.WARNING, logger="gfmlinks"):
        assert asyncio.run(rewriter.on_editor_change(editor, None)) is False
    assert "file not found" in caplog.text


def test_editor_without_document_warns(rewriter, make_editor, caplog):
    editor = make_editor(["[x](#Plumbing%20Notes)"], file_path=None)
    with caplog.at_level(logging.WARNING, logger="gfmlinks"):
        assert asyncio.run(rewriter.on_editor_change(editor, None)) is False
    assert "no document" in caplog.text


def test_no_editor_warns(rewriter, caplog):
    with caplog.at_level(logging.WARNING, logger="gfmlinks"):
        assert asyncio.run(rewriter.on_editor_change(None, None)) is False
    assert "no active editor" in caplog.text


def test_pattern_requires_fragment():
    assert EDIT_LINK_PATTERN.search("[x](note.md)") is None
    assert EDIT_LINK_PATTERN.search("[x](#)") is None
    match = EDIT_LINK_PATTERN.search("[x](a/b.md#Frag)")
    assert match.groups() == ("a/b.md", "Frag")


def test_unreadable_target_warns(tmp_path, make_editor, caplog):
    root = tmp_path / "vault"
    root.mkdir()
    (root / "bad.md").write_bytes(b"# Caf\xe9\n")
    rewriter = EditRewriter(LinkTranslator(FilesystemVault(root)))
    editor = make_editor(["[x](bad.md#Caf)"], file_path="src.md")
    with caplog.at_level(logging.WARNING, logger="gfmlinks"):
        assert asyncio.run(rewriter.on_editor_change(editor, None)) is False
    assert editor.replacements == []
    assert "cannot read" in caplog.text
