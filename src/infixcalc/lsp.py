"""Minimal LSP server for files of expressions, diagnostics only."""

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

from infixcalc import __version__, evaluate_line
from infixcalc.errors import EvalError, LexError, ParseError, PipelineError

server = LanguageServer(
    "infixcalc-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _diagnostic(line: int, exc: PipelineError, severity: DiagnosticSeverity) -> Diagnostic:
    # Empty spans still get a one-character range
    end = max(exc.span.end, exc.span.start + 1)
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=exc.span.start),
            end=Position(line=line, character=end),
        ),
        message=exc.message,
        severity=severity,
        source="infixcalc",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Evaluate every non-blank line and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    for line_idx, line in enumerate(doc.source.splitlines()):
        if not line.strip():
            continue
        try:
            evaluate_line(line)
        except (LexError, ParseError) as exc:
            diagnostics.append(_diagnostic(line_idx, exc, DiagnosticSeverity.Error))
        except EvalError as exc:
            diagnostics.append(_diagnostic(line_idx, exc, DiagnosticSeverity.Warning))

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
