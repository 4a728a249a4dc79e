"""Options dataclass for the scaffold command."""

import os
from dataclasses import dataclass

DEFAULT_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates", "express")


@dataclass
class ScaffoldOpts:
    """All options for the scaffold command."""

    project_name: str | None = None
    template_dir: str = DEFAULT_TEMPLATE_DIR
    non_interactive: bool = False

    @property
    def interactive(self):
        return not self.non_interactive
