"""ScaffoldCommand encapsulates the scaffold workflow logic."""

import sys

from create_backend_app.scaffold.engine import scaffold


class ScaffoldCommand:
    """Scaffolds a project from the bundled template and reports next steps."""

    def __init__(self, opts, reporter, template_renderer, cwd):
        self.opts = opts
        self.reporter = reporter
        self.template_renderer = template_renderer
        self.cwd = cwd

    def execute(self):
        """Run the scaffold and exit non-zero if it failed."""
        result = scaffold(
            self.opts.project_name,
            self.opts.template_dir,
            cwd=self.cwd,
            reporter=self.reporter,
        )
        if not result.succeeded:
            self.reporter.error(result.error)
            sys.exit(1)

        self.reporter.completed(self.template_renderer(
            "next_steps.j2",
            package="create_backend_app",
            project_name=self.opts.project_name,
        ))
        return result
