"""Keep face customizations in a separate, templated file."""

from facefile.core.resolver import DefaultPathResolver, PathResolver, TemplatePathResolver
from facefile.core.saver import FaceFileSaver, SaveMode, SaveTarget
from facefile.core.templating import has_placeholders, resolve, validate_resolved_path
from facefile.errors import ErrorCode, FaceFileError, InvalidTemplate

__all__ = [
    "DefaultPathResolver",
    "ErrorCode",
    "FaceFileError",
    "FaceFileSaver",
    "InvalidTemplate",
    "PathResolver",
    "SaveMode",
    "SaveTarget",
    "TemplatePathResolver",
    "has_placeholders",
    "resolve",
    "validate_resolved_path",
]
