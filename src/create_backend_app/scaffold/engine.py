"""Scaffold engine: materialize a project directory from a template tree."""

import os

from create_backend_app.scaffold.copy_filter import should_exclude
from create_backend_app.scaffold.fixups import GITIGNORE_ALIAS, restore_gitignore
from create_backend_app.scaffold.reporter import ScaffoldReporter
from create_backend_app.scaffold.result import ScaffoldResult
from create_backend_app.scaffold.tree_copy import copy_tree

CURRENT_DIRECTORY = "."


def resolve_target(project_name, cwd):
    """Return the directory a project named *project_name* is created in."""
    if project_name == CURRENT_DIRECTORY:
        return cwd
    return os.path.join(cwd, project_name)


def ensure_target_directory(project_name, target, reporter):
    """Create *target* unless it is the working directory or already exists."""
    if project_name == CURRENT_DIRECTORY:
        reporter.using_current_directory(target)
    elif os.path.exists(target):
        reporter.reusing_directory(project_name)
    else:
        reporter.creating_directory(project_name)
        os.makedirs(target, exist_ok=True)


def scaffold(project_name, template_source, *, cwd=None, reporter=None):
    """Copy *template_source* into the directory named by *project_name*.

    The target is the working directory for ".", otherwise *project_name*
    joined onto it. Existing directories are reused and existing files are
    never overwritten. After the copy a top-level ``gitignore`` is renamed
    to ``.gitignore``.

    Args:
        project_name: Directory name, or "." for the working directory.
        template_source: Directory holding the template tree.
        cwd: Working directory to resolve against. Defaults to os.getcwd().
        reporter: Receives progress callbacks. Defaults to ScaffoldReporter.

    Returns:
        ScaffoldResult; check ``succeeded`` before using the copy details.
    """
    cwd = cwd if cwd is not None else os.getcwd()
    reporter = reporter if reporter is not None else ScaffoldReporter()
    target = resolve_target(project_name, cwd)

    try:
        ensure_target_directory(project_name, target, reporter)
    except OSError as e:
        return ScaffoldResult.failure(
            target, f"Could not create folder {target}: {e}", failed_path=target,
        )

    if not os.path.isdir(template_source):
        return ScaffoldResult.failure(
            target,
            f"Template directory not found at {template_source}",
            failed_path=template_source,
        )

    reporter.copying_started()
    try:
        outcome = copy_tree(
            template_source, target,
            exclude=should_exclude,
            on_copy=reporter.copied,
        )
    except OSError as e:
        return ScaffoldResult.failure(
            target,
            f"Could not copy template files: {e}",
            failed_path=e.filename or target,
        )
    reporter.copy_finished()

    try:
        restored = restore_gitignore(
            target, alias_copied=GITIGNORE_ALIAS in outcome.copied,
        )
    except OSError as e:
        return ScaffoldResult.failure(
            target,
            f"Could not rename {GITIGNORE_ALIAS} to .gitignore: {e}",
            failed_path=e.filename or target,
        )

    return ScaffoldResult(
        target=target,
        copied=outcome.copied,
        skipped=outcome.skipped,
        gitignore_restored=restored,
    )
