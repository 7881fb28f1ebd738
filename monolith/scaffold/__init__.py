"""CI/CD scaffolding: template rendering and file placement.

Turns a ScaffoldConfig into GitHub Actions workflows, server scripts and
Docker files inside an existing project.
"""

from .blocks import remove_step_block, remove_step_blocks
from .core import ScaffoldError, ScaffoldManager
from .templates import TemplateEngine, render_placeholders
from .writer import FileWriter

__all__ = [
    "FileWriter",
    "ScaffoldError",
    "ScaffoldManager",
    "TemplateEngine",
    "remove_step_block",
    "remove_step_blocks",
    "render_placeholders",
]
