"""
Shared constants for the document service.
"""

WORD_EXTENSIONS = (".doc", ".docx")
POWERPOINT_EXTENSIONS = (".ppt", ".pptx")
ALLOWED_EXTENSIONS = WORD_EXTENSIONS + POWERPOINT_EXTENSIONS

DEFAULT_CONTENT_TYPE = "application/octet-stream"
CONTENT_TYPES = {
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".ppt": "application/vnd.ms-powerpoint",
    ".pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
}

# User-facing messages
MISSING_FILE_MESSAGE = "Please select a file"
INVALID_FILE_TYPE_MESSAGE = "Invalid file type. Only .doc, .docx, .pptx, .ppt files are allowed."
UPLOAD_SUCCESS_MESSAGE = "Document processed successfully"
UPLOAD_FAILURE_MESSAGE = "An error occurred while processing the document."
UPDATE_SUCCESS_MESSAGE = "Document updated successfully!"
UPDATE_FAILURE_MESSAGE = "An error occurred while updating the document."
FILE_NOT_FOUND_MESSAGE = "File not found."
DOWNLOAD_FAILURE_MESSAGE = "Error downloading file."
PRESENTATION_EMPTY = "Presentation is empty."
