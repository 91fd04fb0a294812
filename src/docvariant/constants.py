# topmark:header:start
#
#   project      : DocVariant
#   file         : constants.py
#   file_relpath : src/docvariant/constants.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""DocVariant Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    DOCVARIANT_VERSION: str = get_version("docvariant")
except PackageNotFoundError:  # running from a source checkout
    DOCVARIANT_VERSION = "0.0.0"

# Config file names looked up in the working directory
CONFIG_FILE_NAME: str = "docvariant.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# Collaborator files, relative to the source directory
DEFAULT_BUILD_LIST_NAME: str = "build-list.txt"
DEFAULT_COPY_LIST_NAME: str = "copy-list.txt"
DEFAULT_OUTPUT_DIR_NAME: str = "processed"

DEFAULT_DOC_URL: str = "https://www.ixsystems.com/documentation/"

# Directive keywords
INCLUDE_DIRECTIVE: str = "#include"
IFDEF_DIRECTIVE: str = "#ifdef"
ENDIF_DIRECTIVE: str = "#endif"

# Placeholders
BRAND_PLACEHOLDER: str = "%brand%"
BRAND_PLAIN_PLACEHOLDER: str = "%brandplain%"
BRAND_LOWER_PLACEHOLDER: str = "%brandlower%"
CHAPTER_NUMBER_PLACEHOLDER: str = "%chapternum%"
DOC_URL_PLACEHOLDER: str = "%docurl%"

# Grid table column delimiter
COLUMN_DELIMITER: str = "|"
