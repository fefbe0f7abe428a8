"""Minimal LSP server for SimpleDSL: unknown-character diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from simpledsl import __version__
from simpledsl.scanner import Scanner
from simpledsl.tokens import TokenKind

server = LanguageServer(
    "simpledsl-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per unknown character."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    for tok in Scanner(doc.source):
        if tok.kind is not TokenKind.UNKNOWN:
            continue
        line = tok.span.start.line - 1
        # Columns count code points; LSP characters are UTF-16 units, so lines
        # holding characters above U+FFFF are off by one per such character.
        col = tok.span.start.column - 1
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=col + 1),
                ),
                message=f"unknown character {tok.raw!r}",
                severity=DiagnosticSeverity.Warning,
                source="simpledsl",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
