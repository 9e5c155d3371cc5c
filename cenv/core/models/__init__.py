"""
Domain models — Pydantic types for cenv.

    from cenv.core.models import ProjectOptions, Language, BuildTool, GeneratedFile
"""

from cenv.core.models.action import Action, Receipt
from cenv.core.models.options import BuildTool, Language, ProjectOptions
from cenv.core.models.template import GeneratedFile

__all__ = [
    # action.py
    "Action",
    # options.py
    "BuildTool",
    # template.py
    "GeneratedFile",
    "Language",
    "ProjectOptions",
    "Receipt",
]
