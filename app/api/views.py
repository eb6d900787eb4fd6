"""
HTML views for the document pages.

Two pages: the upload form (optionally with an error message) and the editor,
which shows the extracted text and posts edits back as JSON.
"""

from html import escape
from typing import Optional
from urllib.parse import quote

from app.api.models import DocumentModel

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""

_EDITOR_SCRIPT = """<script>
document.getElementById("save").addEventListener("click", async () => {
  const response = await fetch("/Document/UpdateDocumentContent", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify({
      FilePath: document.getElementById("file-path").value,
      Content: document.getElementById("content").value,
    }),
  });
  const result = await response.json();
  document.getElementById("status").textContent = result.message;
});
</script>"""


def render_upload_form(error: Optional[str] = None) -> str:
    parts = ["<h1>Upload document</h1>"]
    if error:
        parts.append(f'<div class="validation-summary">{escape(error)}</div>')
    parts.append(
        '<form method="post" action="/Document/UploadDocumant" enctype="multipart/form-data">\n'
        '<label for="File">Document File</label>\n'
        '<input type="file" id="File" name="File" accept=".doc,.docx,.ppt,.pptx">\n'
        '<button type="submit">Upload</button>\n'
        "</form>"
    )
    return _PAGE.format(title="Upload document", body="\n".join(parts))


def render_editor(document: DocumentModel) -> str:
    download_url = "/Document/DownloadDocument?fileName=" + quote(document.download_name, safe="")
    body = "\n".join([
        f"<h1>{escape(document.file_name)}</h1>",
        f'<p class="message">{escape(document.message)}</p>',
        f'<p>Type: <span class="file-type">{escape(document.file_type)}</span></p>',
        f'<input type="hidden" id="file-path" value="{escape(document.file_path)}">',
        f'<textarea id="content" rows="20" cols="100">{escape(document.content)}</textarea>',
        '<button type="button" id="save">Save</button> <span id="status"></span>',
        f'<p><a href="{escape(download_url)}">Download</a></p>',
        _EDITOR_SCRIPT,
    ])
    return _PAGE.format(title=f"Edit {escape(document.file_name)}", body=body)
