"""Put a rendered table on the macOS pasteboard.

The HTML fragment is wrapped in a document, converted to RTF by ``textutil``
and written to the general pasteboard together with the plain text through a
short Swift script. Spreadsheet and document apps then paste it as a real
table.
"""

from __future__ import annotations

import logging
import subprocess
import sys
import tempfile
from pathlib import Path

from .render_html import wrap_html_document

logger = logging.getLogger(__name__)

_SWIFT_TEMPLATE = """\
import Cocoa

let rtfPath = "{rtf_path}"
let textPath = "{text_path}"

guard let rtfData = FileManager.default.contents(atPath: rtfPath),
      let textData = FileManager.default.contents(atPath: textPath) else {{
    exit(1)
}}

let pasteboard = NSPasteboard.general
pasteboard.clearContents()
pasteboard.setData(rtfData, forType: .rtf)
pasteboard.setData(textData, forType: .string)
"""


class ClipboardError(RuntimeError):
    pass


def build_swift_script(rtf_path: Path, text_path: Path) -> str:
    return _SWIFT_TEMPLATE.format(rtf_path=rtf_path, text_path=text_path)


def _run(command: list[str]) -> None:
    logger.debug("Running %s", " ".join(command))
    try:
        subprocess.run(command, check=True, capture_output=True)
    except FileNotFoundError as exc:
        raise ClipboardError(f"Command not found: {command[0]}") from exc
    except subprocess.CalledProcessError as exc:
        stderr = (exc.stderr or b"").decode("utf-8", errors="replace").strip()
        raise ClipboardError(f"{command[0]} failed with exit status {exc.returncode}: {stderr}") from exc


def copy_html_to_clipboard(html: str, plain_text: str) -> None:
    if sys.platform != "darwin":
        raise ClipboardError(f"Clipboard copy is only supported on macOS (platform: {sys.platform})")

    with tempfile.TemporaryDirectory(prefix="tableclip-") as tmp:
        tmp_dir = Path(tmp)
        html_path = tmp_dir / "clipboard.html"
        rtf_path = tmp_dir / "clipboard.rtf"
        text_path = tmp_dir / "clipboard.txt"
        swift_path = tmp_dir / "clipboard.swift"

        html_path.write_text(wrap_html_document(html), encoding="utf-8")
        text_path.write_text(plain_text, encoding="utf-8")

        _run(["textutil", "-convert", "rtf", "-output", str(rtf_path), str(html_path)])

        swift_path.write_text(build_swift_script(rtf_path, text_path), encoding="utf-8")
        _run(["swift", str(swift_path)])

    logger.debug("Copied %d characters of HTML to the pasteboard", len(html))
